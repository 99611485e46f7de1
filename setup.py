#!/usr/bin/env python3

import os
import re

from setuptools import setup, find_packages


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


def version():
    match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", read("pageturn/__init__.py"), re.M)
    if not match:
        raise RuntimeError("failed to parse version")
    return match.group(1)


install_requires = [
    "httpx >= 0.24.0",
    "multidict >= 6.0.0",
    "wrapt >= 1.14.0",
]

extras_require = {
    "test": [
        "pytest >= 7.0.0",
        "pytest-asyncio >= 0.21.0",
    ],
}

classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: MIT License",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
]

setup(
    name="pageturn",
    version=version(),
    description="Lazy asynchronous iteration through paginated collections of an HTTP API.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=classifiers,
    packages=find_packages(include=["pageturn", "pageturn.*"]),
    python_requires=">= 3.10",
    install_requires=install_requires,
    extras_require=extras_require,
    keywords="http api pagination iterator asyncio",
)
