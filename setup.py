#!/usr/bin/env python
"""
Copyright 2026 Hathor Labs

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

import os
import re

from setuptools import find_packages, setup


def read_version() -> str:
    # lockup.version imports runtime dependencies, which are not available while building
    with open(os.path.join(os.path.dirname(__file__), 'lockup', 'version.py')) as fp:
        match = re.search(r"^BASE_VERSION = '([^']+)'", fp.read(), re.MULTILINE)
    assert match is not None
    return match.group(1)


install_requires = [
    'pydantic>=2,<3',
    'PyYAML>=6',
    'structlog>=22.3',
    'typing_extensions>=4.6',
]

setup(
    name='lockup',
    version=read_version(),
    description='Cell encoders for the lockup NFT collection contract',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(exclude=('lockup_tests', 'lockup_tests.*')),
    package_data={
        'lockup.conf': ['*.yml'],
    },
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
