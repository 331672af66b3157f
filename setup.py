#! /usr/bin/python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup

setup(
    name="collect-unmarked-tests",
    version="1.0",
    packages=find_packages(include=["unmarked_tests", "unmarked_tests.*"], exclude=["unmarked_tests.unittests"]),
    install_requires=[
        "colorlog",
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "collect-unmarked-tests=unmarked_tests.cli:main",
        ],
    },
    python_requires=">=3.10",
)
