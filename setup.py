#!/usr/bin/env python3
"""
WKN Setup Script
================
Allows installation of the wkn package.

Usage:
    pip install -e .           # Development install
    pip install -e .[test]     # With test dependencies
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="wkn",
    version="1.0.0",
    packages=find_packages(include=["wkn", "wkn.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "wkn=wkn.cli:main",
        ],
    },
)
