#!/usr/bin/env python
import codecs
import os.path
import re

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), "r", encoding="utf-8").read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


requires = ["aiohttp>=3.9,<4.0", "yarl>=1.9,<2.0"]

tests_require = ["pytest>=8.0", "pytest-asyncio>=0.23", "freezegun>=1.5"]

setup(
    name="apigateway-generic",
    version=find_version("apigateway_generic", "__init__.py"),
    description="A generic client for APIs deployed on Amazon API Gateway",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    keywords="python aws apigateway sigv4 execute-api",
    scripts=[],
    packages=find_packages(include=["apigateway_generic", "apigateway_generic.*"]),
    include_package_data=True,
    install_requires=requires,
    extras_require={"tests": tests_require},
    python_requires=">=3.12",
    license="Apache License 2.0",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries",
    ],
)
