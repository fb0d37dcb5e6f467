#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup

__version__ = "0.1.0"

develop_requires = [
    "pre-commit",
    "black",
    "flake8",
    "mock",
    "coverage",
    "pytest",
    "mypy",
    "twine",
]

setup(
    name="jsonexplorer",
    version=__version__,
    description="Desktop explorer of JSON documents, as an expandable tree next to their raw text",
    license="MIT",
    packages=["jsonexplorer"],
    package_data={
        "jsonexplorer": ["py.typed"],
    },
    python_requires=">=3.7",
    keywords=["json", "tree", "explorer", "tkinter"],
    entry_points={
        "console_scripts": ["json-explorer=jsonexplorer.cli:main"],
    },
    extras_require={"develop": develop_requires},
    tests_require=develop_requires,
)
