from schemautils.naming import property_name, type_name
from schemautils.value import (Array, Bool, Date, Empty, Null, Number, Object,
                               String, Url)


def render_type(value):
    if isinstance(value, Empty):
        return 'Any'
    elif isinstance(value, Null):
        if value.value is None:
            return 'Any?'
        return render_type(value.value) + '?'
    elif isinstance(value, Bool):
        return 'Bool'
    elif isinstance(value, Number):
        return value.kind
    elif isinstance(value, String):
        return 'String'
    elif isinstance(value, Object):
        return type_name(value.name)
    elif isinstance(value, Array):
        if value.element is None:
            return '[Any]'
        return '[%s]' % render_type(value.element)
    elif isinstance(value, Url):
        return 'URL'
    elif isinstance(value, Date):
        return 'Date'
    raise TypeError('not a Value: %r' % (value,))


def iter_objects(value, seen=None):
    """深度优先遍历所有 Object，同名类型只出现一次
    """
    if seen is None:
        seen = set()
    if isinstance(value, Null) and value.value is not None:
        yield from iter_objects(value.value, seen)
    elif isinstance(value, Array):
        for element in value.values:
            yield from iter_objects(element, seen)
    elif isinstance(value, Object):
        if value.name not in seen:
            seen.add(value.name)
            yield value
        for _, field in value.items():
            yield from iter_objects(field, seen)


def render_outline(value, meta=None):
    property_map = meta.property_map if meta else None
    lines = []
    for obj in iter_objects(value):
        if lines:
            lines.append('')
        lines.append(type_name(obj.name))
        for key, field in obj.items():
            lines.append('  %s: %s' % (property_name(key, property_map), render_type(field)))
    if not lines:
        lines.append(render_type(value))
    return '\n'.join(lines)
