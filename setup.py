# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

import io
import os

import setuptools

NAME = 'resolver_provider'
SHORT_DESCRIPTION = 'Release catalog and requirement ordering for backtracking dependency resolvers'
LICENSE = 'Apache License 2.0'
REQUIRES = [
    'colorama',
    'pydantic>=2',
    'pydantic-settings>=2',
]
TEST_REQUIRES = [
    'pytest',
]

info = {}  # type: ignore
path = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(path, 'README.md'), mode='r', encoding='utf-8') as readme:
    LONG_DESCRIPTION = readme.read()

with io.open(os.path.join(path, 'resolver_tools', '__version__.py'), mode='r', encoding='utf-8') as f:
    exec(f.read(), info)  # nosec

setuptools.setup(
    name=NAME,
    description=SHORT_DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license=LICENSE,
    version=info['__version__'],
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    packages=setuptools.find_packages(
        exclude=('*.tests', '*.tests.*', 'tests.*', 'tests', '*_tests', '*_tests_*', 'tests_*')),
    scripts=[],
    install_requires=REQUIRES,
    extras_require={'test': TEST_REQUIRES},
    python_requires='>=3.8',
    include_package_data=True,
)
