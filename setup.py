#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from setuptools import find_packages, setup

# XXX: keep in sync with serializator/version.py
__version__ = '0.1.0'

setup(
    name='serializator',
    version=__version__,
    description='Compact tagged binary serialization of integers, floats, strings and vectors',
    license='Apache-2.0',
    python_requires='>=3.11',
    entry_points={
        'console_scripts': ['serializator-cli=serializator.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('serializator_tests', 'serializator_tests.*')),
    package_data={
        'serializator.conf': ['*.yml'],
    },
    install_requires=[
        'colorama',
        'configargparse',
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.5',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
