#!/usr/bin/env python

from setuptools import setup, find_packages

PACKAGE_NAME = 'rotation'

setup(
    name=PACKAGE_NAME,
    version='0.1',
    description='Round generation for singles and doubles play that uses every pairing before repeating one.',
    packages=find_packages(include=(f'{PACKAGE_NAME}*',)),
    python_requires='>=3.10',
    install_requires=['attrs', 'numpy', 'pandas', 'tqdm', 'scipy'],
    extras_require={'test': ['pytest']},
)
