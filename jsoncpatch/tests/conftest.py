# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import shutil

from pytest import fixture, skip

from jsoncpatch.documents import DocumentService
from jsoncpatch.tree import TreeService

from .utils import testspath, read_file


pjoin = os.path.join


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return pjoin(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def settings_text(filespath):
    return read_file(pjoin(filespath, "settings.jsonc"))


@fixture
def services(settings_text):
    """A document service and a tree service built from settings.jsonc"""
    documents = DocumentService(settings_text)
    tree = TreeService()
    tree.rebuild(documents.text)
    return documents, tree
