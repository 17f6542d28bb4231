# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


def read_file(filename):
    with io.open(filename, encoding="utf-8", newline="") as f:
        return f.read()


def write_file(filename, text):
    with io.open(filename, "w", encoding="utf-8", newline="") as f:
        f.write(text)
