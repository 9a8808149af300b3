# -*- coding: utf-8 -*-

"""从多个样本推断数据结构

输入文件格式 json / yaml，每个文件是同一个实体的一个样本
"""
import json
import logging
import sys

import click
import jsonschema
import yaml
import schemautils
from schemautils import util
from schemautils.config import ConfigError, Meta, load_meta
from schemautils.export import build_schema, check_schema
from schemautils.merge import MergeError, merged_value
from schemautils.render import render_outline
from schemautils.upgrade import upgrade
from schemautils.value import from_data


def infer_schema(samples, name, meta=None):
    meta = meta or Meta()
    values = [from_data(sample, name) for sample in samples]
    return upgrade(merged_value(values), name, meta.array_object_map)


def read_samples(sources, split, unique):
    samples = util.SampleSet(unique)
    for source in sources or ['-']:
        try:
            data = util.load_document(source)
        except (OSError, ValueError, yaml.YAMLError) as e:
            # 样本文件不存在或者格式错误
            raise click.ClickException('cannot load sample %s: %s' % (source, e))
        if split and isinstance(data, list):
            for item in data:
                samples.add(item, source)
        else:
            samples.add(data, source)
    logging.info('%d samples from %d sources', len(samples), len(sources or ['-']))
    return samples


def format_json_schema(value):
    schema = build_schema(value)
    try:
        check_schema(schema)
    except jsonschema.SchemaError as e:
        logging.error('invalid schema: %s', e.message)
    return json.dumps(schema, ensure_ascii=False, indent=2)


@click.command()
@click.option('--name', '-n', default='root', help='实体名称.')
@click.option('--meta', '-m', default=None, help='配置文件（property_map / array_object_map）.')
@click.option('--format', '-f', 'output_format', default='outline',
              type=click.Choice(['outline', 'json-schema']), help='输出格式.')
@click.option('--split', '-s', is_flag=True, help='文件内容是列表时，每一项作为一个样本.')
@click.option('--unique', '-u', is_flag=True, help='跳过结构重复的样本.')
@click.option('--output', '-o', default=None, help='输出文件名.')
@click.option('--debug', '-d', is_flag=True, help='是否输出调试信息.')
@click.option('--version', '-v', is_flag=True, is_eager=True, help='版本信息.')
@click.argument('samples', nargs=-1)
def run(name, meta, output_format, split, unique, output, debug, version, samples):
    if version:
        click.echo('schemainfer %s' % schemautils.__version__)
        return

    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=log_level, format=log_format, stream=sys.stderr)

    try:
        meta = load_meta(meta) if meta else Meta()
        value = infer_schema(read_samples(samples, split, unique), name, meta)
    except (ConfigError, MergeError) as e:
        raise click.ClickException(str(e))

    if output_format == 'json-schema':
        text = format_json_schema(value)
    else:
        text = render_outline(value, meta)

    if output:
        with open(output, 'w', encoding='utf-8') as fp:
            fp.write(text + '\n')
    else:
        click.echo(text)


if __name__ == "__main__":
    run()
