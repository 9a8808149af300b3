"""配置文件（yaml）::

    property_map:
      id: identifier
    array_object_map:
      people: person
"""
import jsonschema
import yaml

META_SCHEMA = {
    'type': 'object',
    'properties': {
        'property_map': {
            'type': 'object',
            'additionalProperties': {'type': 'string'},
        },
        'array_object_map': {
            'type': 'object',
            'additionalProperties': {'type': 'string'},
        },
    },
    'additionalProperties': False,
}


class ConfigError(ValueError):
    pass


class Meta(object):
    def __init__(self, property_map=None, array_object_map=None):
        self.property_map = dict(property_map or {})
        self.array_object_map = dict(array_object_map or {})

    def __repr__(self):
        return 'Meta(property_map=%r, array_object_map=%r)' % (
            self.property_map, self.array_object_map)


def load_meta(path):
    try:
        with open(path, 'r', encoding='utf-8') as stream:
            data = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError('%s: %s' % (path, e)) from e

    if data is None:
        return Meta()

    try:
        jsonschema.validate(data, META_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ConfigError('%s: %s' % (path, e.message)) from e

    return Meta(data.get('property_map'), data.get('array_object_map'))
