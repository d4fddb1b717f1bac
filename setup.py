#!/usr/bin/env python
# coding: utf-8

# Copyright (c) jsondime Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDIME_PATH = HERE / "jsondime"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(JSONDIME_PATH / '_version.py')

LONG_DESCRIPTION = (
    "Minimal RFC 6902 JSON patches between JSON documents, "
    "computed with a longest common run split of arrays, "
    "and tools to apply and (de)serialize them."
)


if __name__ == '__main__':
    setup(
      name="jsondime",
      version=VERSION,
      description="Diff and patch JSON documents with RFC 6902 JSON Patch",
      long_description=LONG_DESCRIPTION,
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(include=["jsondime", "jsondime.*"]),
      package_data={
          "jsondime": ["*.schema.json"],
          "jsondime.tests": ["files/*.json"],
      },
      install_requires=[
          "colorama",
          "jsonpointer>=2.0",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "jsonschema",
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "jsondime = jsondime.__main__:main_dispatch",
              "jsdiff = jsondime.jsdiffapp:main",
              "jspatch = jsondime.jspatchapp:main",
          ],
      },
      )
