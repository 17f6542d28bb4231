# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsoncpatch.edits import (
    TextEdit, op_insert, op_replace, op_remove, apply_edit, apply_edits,
)


def test_edit_ops():
    assert op_insert(3, "x") == TextEdit(3, 0, "x")
    assert op_replace(1, 2, "y") == TextEdit(1, 2, "y")
    assert op_remove(2, 5) == TextEdit(2, 3, "")
    assert op_remove(2, 5).end == 5


def test_apply_edit():
    assert apply_edit("abcdef", op_replace(1, 2, "XY")) == "aXYdef"


def test_apply_edits_in_any_order():
    text = "0123456789"
    edits = [op_insert(0, "<"), op_remove(8, 10), op_replace(4, 1, "four")]
    assert apply_edits(text, edits) == "<0123four567"
    assert apply_edits(text, list(reversed(edits))) == "<0123four567"


def test_apply_edits_same_offset_inserts_keep_order():
    assert apply_edits("ab", [op_insert(1, "x"), op_insert(1, "y")]) == "axyb"


def test_apply_no_edits():
    assert apply_edits("abc", []) == "abc"


def test_apply_overlapping_edits():
    with pytest.raises(ValueError):
        apply_edits("0123456789", [op_replace(2, 4, "a"), op_replace(5, 2, "b")])


def test_apply_edit_outside_text():
    with pytest.raises(ValueError):
        apply_edits("abc", [op_replace(2, 5, "")])
