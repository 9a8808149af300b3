import schemautils
from setuptools import setup

setup(
    name='schemautils',
    description='Schema inference from JSON samples.',
    version=schemautils.__version__,
    url='N/A',
    author='ycyuxin',
    author_email='ycyuxin(at)qq.com',
    packages=['schemautils'],
    entry_points={
        'console_scripts':
            [
                'schemainfer = schemautils.schemainfer:run',
            ]
    },
    install_requires=[
        'click',
        'genson',
        'jsonschema',
        'PyYAML',
    ],
    extras_require={
        'test': [
            'pytest',
        ]
    },
    zip_safe=False
)
