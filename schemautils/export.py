"""把推断结果导出成 JSON Schema (draft 7)
"""
import jsonschema

from schemautils.naming import type_name
from schemautils.value import (Array, Bool, Date, DateType, Empty, Null, Number,
                               Object, String, Url)


def build_object(value):
    properties = {}
    required = []
    for key, field in value.items():
        properties[key] = build_schema(field)
        if not field.is_null:
            required.append(key)
    schema = {
        'type': 'object',
        'title': type_name(value.name),
    }
    if properties:
        schema.update(properties=properties)
    if required:
        schema.update(required=required)
    return schema


def build_array(value):
    if value.element is not None:
        items = build_schema(value.element)
    else:
        items = {}
    return {
        'type': 'array',
        'items': items,
    }


def build_null(value):
    if value.value is None:
        return {
            'type': 'null',
        }
    schema = build_schema(value.value)
    if 'type' not in schema:
        # Any? 还是 Any
        return schema
    schema['type'] = [schema['type'], 'null']
    return schema


def build_number(value):
    return {
        'type': 'number' if value.is_double else 'integer',
        'example': value.value,
    }


def build_boolean(value):
    return {
        'type': 'boolean',
        'example': value.value,
    }


def build_string(value):
    return {
        'type': 'string',
        'example': value.value,
    }


def build_url(value):
    return {
        'type': 'string',
        'format': 'uri',
        'example': value.value,
    }


def build_date(value):
    if value.date_type == DateType.SECONDS_SINCE_1970:
        return {
            'type': 'number',
            'description': 'seconds since 1970',
        }
    return {
        'type': 'string',
        'format': 'date-time' if value.date_type == DateType.ISO8601 else 'date',
    }


def build_schema(value):
    if isinstance(value, Object):
        return build_object(value)
    elif isinstance(value, Array):
        return build_array(value)
    elif isinstance(value, Null):
        return build_null(value)
    elif isinstance(value, Bool):
        return build_boolean(value)
    elif isinstance(value, Number):
        return build_number(value)
    elif isinstance(value, String):
        return build_string(value)
    elif isinstance(value, Url):
        return build_url(value)
    elif isinstance(value, Date):
        return build_date(value)
    elif isinstance(value, Empty):
        return {}
    raise TypeError('not a Value: %r' % (value,))


def check_schema(schema):
    """校验导出的 Schema 本身是否合法，不合法时抛出 jsonschema.SchemaError
    """
    jsonschema.Draft7Validator.check_schema(schema)
    return schema
