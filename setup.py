#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='beziertools',
    version='0.1.0',
    description='Cubic Bezier curves and splines - Bernstein basis, '
                'curvature, C1 continuity constraints, interactive viewer',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'beziertools': 'sources/model',
        'beziertools_gui': 'sources/gui',
    },
    packages=['beziertools', 'beziertools_gui'],
    package_data={
        'beziertools': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'matplotlib>=3.5',
    ],
    extras_require={
        'gui': ['PySide6>=6.5'],
        'test': ['pytest>=7'],
    },
    python_requires='>=3.8',
)
