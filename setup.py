# Copyright 2026 The should_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Setup file for should_harness package.
"""

from setuptools import setup, find_packages

setup(
    name='should_harness',
    version='1.0.0',
    packages=find_packages(exclude=['test', 'test.*', 'docs']),
    python_requires='>=3.8',
    install_requires=['setuptools'],
    extras_require={
        'hypothesis': ['hypothesis>=6.0'],
        'test': ['pytest>=7.0', 'hypothesis>=6.0'],
    },
    zip_safe=True,
    author='John',
    author_email='john@example.com',
    maintainer='John',
    maintainer_email='john@example.com',
    description='Fluent collection assertions for Python tests',
    license='Apache-2.0',
)
