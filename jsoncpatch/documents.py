# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

from .log import info


class DocumentService(object):
    """Owns the current document text.

    `has_changes` tells whether the text holds changes that were not
    saved or explicitly marked clean.
    """

    def __init__(self, text="", filename=None):
        self._text = text
        self.filename = filename
        self.has_changes = False

    @property
    def text(self):
        return self._text

    def set_document(self, text, mark_clean=False):
        self._text = text
        self.has_changes = not mark_clean

    def load(self, filename):
        with io.open(filename, encoding="utf-8", newline="") as f:
            text = f.read()
        self.filename = filename
        self.set_document(text, mark_clean=True)
        return text

    def save(self, filename=None):
        if filename is None:
            filename = self.filename
        if filename is None:
            raise ValueError("No filename to save the document to.")
        with io.open(filename, "w", encoding="utf-8", newline="") as f:
            f.write(self._text)
        info("Document written to %s", filename)
        self.filename = filename
        self.has_changes = False
