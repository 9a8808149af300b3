"""推断出来的数据结构

Value 是一个递归的 tagged union，所有语义都在 merge / upgrade 里，这里只负责表示。
"""


class DateType(object):
    ISO8601 = 'iso8601'
    DATE_ONLY = 'dateOnly'
    SECONDS_SINCE_1970 = 'secondsSince1970'


class Value(object):
    __slots__ = ()

    def _fields(self):
        return ()

    @property
    def is_null(self):
        return False

    def __eq__(self, other):
        return type(self) is type(other) and self._fields() == other._fields()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(repr(f) for f in self._fields()))


class Empty(Value):
    __slots__ = ()


class Null(Value):
    """value 是所有非 null 观测值合并的结果，没有观测到时为 None
    """
    __slots__ = ('value',)

    def __init__(self, value=None):
        self.value = value

    def _fields(self):
        return (self.value,)

    @property
    def is_null(self):
        return True


class Bool(Value):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def _fields(self):
        return (self.value,)


class Number(Value):
    INT = 'Int'
    DOUBLE = 'Double'

    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def _fields(self):
        return (self.kind, self.value)

    @property
    def kind(self):
        return self.DOUBLE if isinstance(self.value, float) else self.INT

    @property
    def is_double(self):
        return self.kind == self.DOUBLE


class String(Value):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def _fields(self):
        return (self.value,)


class Object(Value):
    """keys 决定字段顺序，dictionary 用于按 key 查找，两者必须一致
    """
    __slots__ = ('name', 'keys', 'dictionary')

    def __init__(self, name, keys, dictionary):
        keys = tuple(keys)
        if len(set(keys)) != len(keys) or set(keys) != set(dictionary):
            raise ValueError('object %r: keys %r do not match fields %r'
                             % (name, keys, sorted(dictionary)))
        self.name = name
        self.keys = keys
        self.dictionary = dict(dictionary)

    def _fields(self):
        return (self.name, self.keys, tuple(self.dictionary[key] for key in self.keys))

    def items(self):
        for key in self.keys:
            yield key, self.dictionary[key]


class Array(Value):
    __slots__ = ('name', 'values')

    def __init__(self, name, values):
        self.name = name
        self.values = tuple(values)

    def _fields(self):
        return (self.name, self.values)

    @property
    def element(self):
        return self.values[0] if self.values else None


class Url(Value):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def _fields(self):
        return (self.value,)


class Date(Value):
    __slots__ = ('date_type',)

    def __init__(self, date_type):
        self.date_type = date_type

    def _fields(self):
        return (self.date_type,)


def from_data(data, name):
    """把 json.loads / yaml.safe_load 得到的数据包装成 Value

    列表里的元素都用列表自己的名字，upgrade 时再改成单数形式。
    元素类型不兼容时抛出 MergeError。
    """
    if isinstance(data, dict):
        # ! yaml 的 key 不一定是字符串
        fields = {str(key): value for key, value in data.items()}
        return Object(name, fields.keys(),
                      {key: from_data(value, key) for key, value in fields.items()})
    elif isinstance(data, list):
        from schemautils.merge import merged_value

        # 列表元素在包装时就合并成一个，保证 Array 只有一个元素
        return Array(name, [merged_value([from_data(item, name) for item in data])])
    elif isinstance(data, bool):
        return Bool(data)
    elif isinstance(data, (int, float)):
        return Number(data)
    elif data is None:
        return Null()
    elif isinstance(data, str):
        return String(data)
    else:
        # ! yaml 会把时间解析成 datetime，这里统一当字符串
        return String(str(data))
