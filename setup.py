#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='foilsweep',
    version='0.1.0',
    description='Airfoil angle-of-attack sweep tools - coordinate formatting '
                'for panel solvers, Pareto-optimal configuration selection',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'foilsweep': 'sources/model',
    },
    packages=['foilsweep'],
    package_data={
        'foilsweep': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'matplotlib>=3.5',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    python_requires='>=3.8',
)
