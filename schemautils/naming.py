def capitalize_first(text):
    return text[:1].upper() + text[1:]


def lowercase_first(text):
    return text[:1].lower() + text[1:]


def type_name(name):
    """snake_case -> UpperCamelCase
    """
    return capitalize_first(''.join(capitalize_first(part) for part in name.split('_')))


def property_name(key, property_map=None):
    if property_map and key in property_map:
        return property_map[key]
    return lowercase_first(type_name(key))


def singular_form(name, array_object_map=None):
    """列表名 -> 元素的类型名

    只处理 xxxlist 和 xxxs 两种情况，不认识不规则复数。
    """
    if array_object_map and name in array_object_map:
        return array_object_map[name]
    if name.endswith('list'):
        return name[:-4]
    elif name.endswith('s'):
        return name[:-1]
    return name
