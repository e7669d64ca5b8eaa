#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="numerus",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Word and character counts for HTML, shortcode and Markdown text",
    long_description="Counts words, characters excluding spaces, or characters including spaces in rich text, "
    "after normalizing away markup, comments, shortcodes and entities with an overridable table of regular expressions.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Text Processing :: Markup :: Markdown",
    ],
    keywords=["wordcount", "word count", "character count"],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=22.2.0",
        "markdown-it-py",
        "msgspec>=0.16",
    ],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
    entry_points={
        "console_scripts": [
            "numerus-count = numerus.scripts:count_cli",
        ],
    },
)
