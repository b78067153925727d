#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

NBALIGN_PATH = HERE / "nbalign"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(NBALIGN_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="nbalign",
      version=VERSION,
      description="Cell level diffing of Jupyter notebooks with side-by-side rows and change navigation",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(include=["nbalign", "nbalign.*"]),
      package_data={
          "nbalign": ["*.schema.json"],
          "nbalign.tests": ["files/*.ipynb"],
      },
      install_requires=[
          "nbformat",
          "colorama",
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
              "nbalign = nbalign.__main__:main_dispatch",
              "nbalign-diff = nbalign.nbdiffapp:main",
          ],
      },
    )
