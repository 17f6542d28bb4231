# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsoncpatch.log import JSONCSyntaxError
from jsoncpatch.parser import (
    NodeType, parse, parse_tree, find_node_at_location,
)


def test_parse_comments_and_trailing_commas(settings_text):
    assert parse(settings_text) == {
        "theme": {
            "name": "light",
            "color": "#ffffff",
            "fonts": ["Fira Code", "Menlo"],
        },
        "plugins": [
            {"name": "git", "enabled": True},
            {"name": "lint", "enabled": False},
        ],
        "count": 3,
    }


def test_parse_scalars():
    assert parse('42') == 42
    assert parse('-0.5') == -0.5
    assert parse('1e2') == 100.0
    assert parse('"\\u00e9"') == u"é"
    assert parse(' null // nothing') is None
    assert parse('[true, false]') == [True, False]


def test_parse_tree_offsets():
    text = '{"a": [1, 2]}'
    root = parse_tree(text)
    assert root.type == NodeType.OBJECT
    assert (root.offset, root.length) == (0, 13)

    prop = root.children[0]
    assert prop.type == NodeType.PROPERTY
    assert (prop.offset, prop.length) == (1, 11)
    assert prop.colon_offset == 4
    key, value = prop.children
    assert key.value == "a"
    assert value.type == NodeType.ARRAY
    assert (value.offset, value.length) == (6, 6)
    assert value.parent is prop
    assert [c.value for c in value.children] == [1, 2]
    assert text[value.children[1].offset:value.children[1].end] == "2"


def test_find_node_at_location():
    root = parse_tree('{"a": [1, 2], "b": {"c": null}}')
    assert find_node_at_location(root, []) is root
    assert find_node_at_location(root, ["a", 1]).value == 2
    assert find_node_at_location(root, ["b", "c"]).type == NodeType.NULL
    assert find_node_at_location(root, ["a", 5]) is None
    assert find_node_at_location(root, ["a", "0"]) is None
    assert find_node_at_location(root, ["b", 0]) is None
    assert find_node_at_location(root, ["a", True]) is None
    assert find_node_at_location(root, ["x"]) is None
    assert find_node_at_location(root, ["a", 0, "deeper"]) is None


def test_duplicate_keys():
    text = '{"a": 1, "a": 2}'
    # Lookups and values both resolve to the last member
    assert find_node_at_location(parse_tree(text), ["a"]).value == 2
    assert parse(text) == {"a": 2}


@pytest.mark.parametrize("text, message", [
    ('', "Value expected"),
    ('// only a comment', "Value expected"),
    ('{"a": 1 "b": 2}', "Comma expected"),
    ('[1,,]', "Value expected"),
    ('{"a" 1}', "Colon expected"),
    ('{a: 1}', "Unexpected character"),
    ('{1: 1}', "Property name expected"),
    ('1 2', "End of file expected"),
    ('{"a": 1', "Comma expected"),
    ('"\\q"', "Invalid string"),
])
def test_parse_errors(text, message):
    with pytest.raises(JSONCSyntaxError) as e:
        parse_tree(text)
    assert message in str(e.value)


def test_parse_deeply_nested():
    depth = 2000
    root = parse_tree('{"a": ' * depth + '[]' + '}' * depth)
    node = find_node_at_location(root, ["a"] * depth)
    assert node.type == NodeType.ARRAY
    assert node.offset == 6 * depth
    assert (root.offset, root.length) == (0, 7 * depth + 2)
    assert root.children[0].length == 7 * depth

    value = parse('[' * depth + 'null' + ']' * depth)
    for _ in range(depth):
        value = value[0]
    assert value is None


def test_parse_deeply_nested_unclosed():
    with pytest.raises(JSONCSyntaxError) as e:
        parse_tree('[' * 2000)
    assert "Value expected" in str(e.value)
