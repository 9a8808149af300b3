"""合并之后的第二遍处理

给对象和列表起名字，把看起来像时间戳 / URL 的数字和字符串升级成 Date / Url。
"""
import logging
from datetime import datetime
from urllib.parse import urlsplit

from schemautils.merge import merged_value
from schemautils.naming import singular_form
from schemautils.value import Array, Date, DateType, Number, Object, String, Url

# 大于等于这个值的数字当作 Unix 时间戳（秒）
SECONDS_SINCE_1970_THRESHOLD = 1000000000


class DateMatcher(object):
    def __init__(self, date_format):
        self.date_format = date_format

    def match(self, text):
        try:
            datetime.strptime(text, self.date_format)
        except ValueError:
            return False
        return True


# 构造后只读，可以共享
ISO8601_MATCHER = DateMatcher('%Y-%m-%dT%H:%M:%S.%f%z')
DATE_ONLY_MATCHER = DateMatcher('%Y-%m-%d')


def is_url(text):
    if not text or any(c.isspace() for c in text):
        return False
    try:
        parts = urlsplit(text)
        hostname = parts.hostname
    except ValueError:
        return False
    return bool(parts.scheme and hostname)


class Upgrader(object):
    def __init__(self, array_object_map=None,
                 iso8601_matcher=ISO8601_MATCHER, date_only_matcher=DATE_ONLY_MATCHER):
        self.array_object_map = array_object_map or {}
        self.iso8601_matcher = iso8601_matcher
        self.date_only_matcher = date_only_matcher

    def date_type_of(self, text):
        if self.iso8601_matcher.match(text):
            return DateType.ISO8601
        if self.date_only_matcher.match(text):
            return DateType.DATE_ONLY
        return None

    def upgrade(self, value, new_name):
        if isinstance(value, Number):
            return self.upgrade_number(value)
        elif isinstance(value, String):
            return self.upgrade_string(value)
        elif isinstance(value, Object):
            return Object(new_name, value.keys,
                          {key: self.upgrade(field, key) for key, field in value.items()})
        elif isinstance(value, Array):
            element_name = singular_form(new_name, self.array_object_map)
            values = [self.upgrade(element, element_name) for element in value.values]
            return Array(new_name, [merged_value(values)])
        return value

    # noinspection PyMethodMayBeStatic
    def upgrade_number(self, value):
        if value.value >= SECONDS_SINCE_1970_THRESHOLD:
            logging.debug('number %r looks like a timestamp', value.value)
            return Date(DateType.SECONDS_SINCE_1970)
        return value

    def upgrade_string(self, value):
        if is_url(value.value):
            logging.debug('string %r looks like a url', value.value)
            return Url(value.value)
        date_type = self.date_type_of(value.value)
        if date_type:
            logging.debug('string %r looks like a %s date', value.value, date_type)
            return Date(date_type)
        return value


def upgrade(value, new_name, array_object_map=None):
    return Upgrader(array_object_map).upgrade(value, new_name)
