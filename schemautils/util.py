import json
import logging
import sys

import genson
import yaml


def load_document(path):
    if path == '-':
        return json.load(sys.stdin)
    with open(path, 'r', encoding='utf-8') as stream:
        if path.endswith(('.yaml', '.yml')):
            return yaml.safe_load(stream)
        return json.load(stream)


def shape_of(data):
    """样本的结构指纹，值不同但结构相同的样本指纹相同
    """
    builder = genson.SchemaBuilder()
    builder.add_object(data)
    return builder.to_json(sort_keys=True)


class SampleSet(object):
    def __init__(self, unique=False):
        self.unique = unique
        self.samples = []
        self.shapes = set()

    def __len__(self):
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def add(self, sample, source='-'):
        if self.unique:
            shape = shape_of(sample)
            if shape in self.shapes:
                logging.debug('skip sample with duplicate shape: %s', source)
                return False
            self.shapes.add(shape)
        self.samples.append(sample)
        return True
