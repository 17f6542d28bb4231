# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple


__all__ = ["TextEdit", "op_insert", "op_replace", "op_remove",
           "apply_edit", "apply_edits"]


class TextEdit(namedtuple("TextEdit", ["offset", "length", "content"])):
    """Replace `length` characters at `offset` with `content`.

    Offsets always refer to the text the edit was computed against.
    """
    __slots__ = ()

    @property
    def end(self):
        return self.offset + self.length


def op_insert(offset, content):
    "Create an edit inserting content at offset."
    return TextEdit(offset, 0, content)

def op_replace(offset, length, content):
    "Create an edit replacing the span offset:offset+length with content."
    return TextEdit(offset, length, content)

def op_remove(offset, end):
    "Create an edit removing the span offset:end."
    return TextEdit(offset, end - offset, "")


def apply_edit(text, edit):
    return text[:edit.offset] + edit.content + text[edit.end:]


def apply_edits(text, edits):
    """Apply a list of edits computed against the same text.

    Edits are applied from the end of the text towards the start, so
    that earlier offsets stay valid. Overlapping edits are rejected.
    """
    ordered = sorted(edits, key=lambda e: (e.offset, e.length))
    for prev, e in zip(ordered, ordered[1:]):
        if e.offset < prev.end:
            raise ValueError("Overlapping edits at offsets %d and %d." % (prev.offset, e.offset))
    for e in reversed(ordered):
        if not 0 <= e.offset <= e.end <= len(text):
            raise ValueError("Edit %r is outside of the text." % (e,))
        text = apply_edit(text, e)
    return text
