"""合并多个样本推断出来的 Value

同一个实体的不同样本可能缺字段、为 null、int / double 混用，这些都按规则合并；
名字不同的对象 / 列表，或者类型根本不兼容的标量，说明样本不是同一个实体，直接报错。

注意：Bool 取 AND，String 取第一个非空值，只是保留一个示例值，和参数顺序有关。
"""
from schemautils.render import render_type
from schemautils.value import (Array, Bool, Date, Empty, Null, Number, Object,
                               String, Url)


class MergeError(Exception):
    def __init__(self, message, left, right):
        super().__init__(message)
        self.left = left
        self.right = right


class EntityNameMismatch(MergeError):
    def __init__(self, kind, left, right):
        message = 'cannot merge %s %r with %s %r' % (kind, left.name, kind, right.name)
        super().__init__(message, left, right)
        self.kind = kind
        self.left_name = left.name
        self.right_name = right.name


class IncompatibleMerge(MergeError):
    def __init__(self, left, right):
        message = 'cannot merge %s with %s' % (render_type(left), render_type(right))
        super().__init__(message, left, right)


def merged_value(values):
    result = Empty()
    for value in values:
        result = merge(result, value)
    return result


def optional(value):
    return value if value.is_null else Null(value)


def merge_null(a, b):
    if a.value is not None and b.value is not None:
        return Null(merge(a.value, b.value))
    elif a.value is not None:
        return a
    return b


def merge_object(a, b):
    if a.name != b.name:
        raise EntityNameMismatch('object', a, b)

    dictionary = {}
    for key, value in a.items():
        if key in b.dictionary:
            dictionary[key] = merge(b.dictionary[key], value)
        else:
            dictionary[key] = optional(value)

    keys = list(a.keys)
    for key, value in b.items():
        if key not in a.dictionary:
            # 只在部分样本中出现的字段都是可选的
            dictionary[key] = optional(value)
            keys.append(key)

    return Object(a.name, keys, dictionary)


def merge_array(a, b):
    if a.name != b.name:
        raise EntityNameMismatch('array', a, b)
    return Array(a.name, [merged_value(a.values + b.values)])


def merge(a, b):
    if isinstance(a, Empty):
        return b
    if isinstance(b, Empty):
        return a

    if isinstance(a, Null) and isinstance(b, Null):
        return merge_null(a, b)
    if isinstance(a, Null):
        return Null(b if a.value is None else merge(a.value, b))
    if isinstance(b, Null):
        return Null(a if b.value is None else merge(b.value, a))

    if isinstance(a, Bool) and isinstance(b, Bool):
        return Bool(a.value and b.value)
    if isinstance(a, Number) and isinstance(b, Number):
        return b if b.is_double else a
    if isinstance(a, String) and isinstance(b, String):
        return a if a.value else b
    if isinstance(a, Object) and isinstance(b, Object):
        return merge_object(a, b)
    if isinstance(a, Array) and isinstance(b, Array):
        return merge_array(a, b)
    if isinstance(a, Url) and isinstance(b, Url):
        return a
    if isinstance(a, Date) and isinstance(b, Date):
        return a

    # URL 和普通字符串混用时退回 String
    if isinstance(a, Url) and isinstance(b, String):
        return b
    if isinstance(a, String) and isinstance(b, Url):
        return a

    raise IncompatibleMerge(a, b)
