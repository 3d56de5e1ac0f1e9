# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

try:
    long_description = open("README.rst").read()
except IOError:
    long_description = ""

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(
    name="prefixsum",
    version="0.1.0",
    description="Fixed-capacity Fenwick tree for point updates and prefix-sum queries.",
    license="MIT",
    packages=find_packages(include=['prefixsum', 'prefixsum.*']),
    long_description=long_description,
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True
)
