#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

PATCHGUARD_PATH = HERE / "patchguard"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(PATCHGUARD_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="patchguard",
      version=VERSION,
      description="Build RFC 6902 JSON Patch documents that never test forbidden paths",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(include=["patchguard", "patchguard.*"]),
      package_data={"patchguard": ["*.schema.json"]},
      python_requires=">=3.8",
      install_requires=[
          "traitlets>=5",
          "jupyter_core",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "jsonschema",
          ],
      },
      entry_points={
          "console_scripts": [
              "patchguard = patchguard.__main__:main_dispatch",
              "patchguard-check = patchguard.checkapp:main",
          ],
      },
    )
