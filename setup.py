#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: ai ts=4 sts=4 et sw=4 nu

import pathlib
import re

from setuptools import find_packages, setup

root_dir = pathlib.Path(__file__).parent


def read(*names, **kwargs):
    with open(root_dir.joinpath(*names), "r") as fh:
        return fh.read()


def get_version():
    match = re.search(
        r'^__version__\s*=\s*["\']([^"\']+)["\']',
        read("src", "oci_reference", "__init__.py"),
        re.MULTILINE,
    )
    return match.group(1) if match else ""


setup(
    name="oci_reference",
    version=get_version(),
    description="Parse, validate and normalize container image references and digests",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    author="kiwix",
    author_email="reg@kiwix.org",
    url="https://github.com/offspot/oci_reference",
    keywords="docker oci reference digest",
    license="GPLv3+",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        line.strip()
        for line in read("requirements.txt").splitlines()
        if not line.strip().startswith("#")
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    zip_safe=True,
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "oci-reference=oci_reference.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    ],
    python_requires=">=3.9",
)
