# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsoncpatch.paths import format_path, parse_path, paths_equal, split_path


def test_format_path_root():
    assert format_path() == "$"
    assert format_path(None) == "$"
    assert format_path([]) == "$"
    assert format_path(()) == "$"


def test_format_path_segments():
    assert format_path(["customer", 0, "name"]) == '$["customer"][0]["name"]'
    assert format_path([3]) == "$[3]"
    assert format_path(["0"]) == '$["0"]'


def test_format_path_one_bracket_pair_per_segment():
    path = ["a", 1, "b", 22, "c d"]
    formatted = format_path(path)
    assert formatted.count("[") == len(path)
    assert formatted.count("]") == len(path)


def test_format_path_keeps_quotes_in_keys():
    assert format_path(['say "hi"']) == '$["say "hi""]'


def test_paths_equal():
    assert paths_equal(["a", 1], ("a", 1))
    assert paths_equal(None, [])
    assert paths_equal((), None)
    assert not paths_equal([1], ["1"])
    assert not paths_equal(["a"], ["a", 0])
    assert not paths_equal(["a", 0], ["a", 1])
    assert not paths_equal([1], [True])


@pytest.mark.parametrize("path", [
    (),
    ("theme",),
    ("plugins", 1, "name"),
    ("", 0, "with space"),
])
def test_parse_formatted_path(path):
    assert parse_path(format_path(path)) == path


def test_parse_pointer_path():
    assert parse_path("/plugins/1/name") == ("plugins", 1, "name")
    assert parse_path("/") == ()
    assert parse_path("theme") == ("theme",)


@pytest.mark.parametrize("expr", [
    '$[abc]',
    '$["a"',
    '$.a',
    '$[-1]',
])
def test_parse_path_invalid(expr):
    with pytest.raises(ValueError):
        parse_path(expr)


def test_split_path():
    assert split_path("/a/b/") == ["a", "b"]
    assert split_path("") == []
