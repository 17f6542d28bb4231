#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()


PACKAGE_PATH = HERE / "jsoncpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(PACKAGE_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsoncpatch',
      version=VERSION,
      description='Path addressed, comment preserving edits of JSON documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(include=['jsoncpatch', 'jsoncpatch.*']),
      package_data={'jsoncpatch.tests': ['files/*']},
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': ['pytest>=6'],
      },
      entry_points={
          'console_scripts': [
              'jsoncpatch = jsoncpatch.jsoncpatchapp:main',
              'jsoncshow = jsoncpatch.jsoncshowapp:main',
          ],
      },
    )
