# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Syntax tree for JSON documents with comments and trailing commas.

Nodes keep the offset and length of the text they were parsed from.
Comments are skipped, and a single trailing comma is accepted before
a closing brace or bracket.
"""

import json

from .log import JSONCSyntaxError
from .scanner import TokenKind, significant_tokens


__all__ = ["SyntaxNode", "parse_tree", "parse", "node_value",
           "find_node_at_location"]


class NodeType:
    "Collection of valid values for the type field of syntax nodes."
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class SyntaxNode(object):
    """A node of the syntax tree.

    Properties are nodes of their own: their children are the key
    string node and the value node. Object children are properties,
    array children are values.
    """

    def __init__(self, type, offset, length=0, parent=None, value=None):
        self.type = type
        self.offset = offset
        self.length = length
        self.parent = parent
        self.value = value
        self.children = []
        self.colon_offset = -1

    @property
    def end(self):
        return self.offset + self.length

    def __repr__(self):
        return "SyntaxNode(%r, offset=%d, length=%d)" % (
            self.type, self.offset, self.length)


_literals = {
    TokenKind.TRUE: (NodeType.BOOLEAN, True),
    TokenKind.FALSE: (NodeType.BOOLEAN, False),
    TokenKind.NULL: (NodeType.NULL, None),
}

_containers = {
    TokenKind.OPEN_BRACE: NodeType.OBJECT,
    TokenKind.OPEN_BRACKET: NodeType.ARRAY,
}

_container_types = (NodeType.OBJECT, NodeType.ARRAY)


def _decode(token):
    try:
        return json.loads(token.text)
    except ValueError:
        raise JSONCSyntaxError("Invalid %s %s" % (token.kind, token.text), token.offset)


class _Parser(object):

    def __init__(self, text):
        self.tokens = list(significant_tokens(text))
        self.pos = 0

    def peek(self):
        return self.tokens[self.pos]

    def advance(self):
        token = self.tokens[self.pos]
        if token.kind != TokenKind.EOF:
            self.pos += 1
        return token

    def expect(self, kind, message):
        token = self.peek()
        if token.kind != kind:
            raise JSONCSyntaxError(message, token.offset)
        return self.advance()

    def parse_document(self):
        """Parse a single value and the end of the text.

        Containers are tracked on an explicit stack, so nesting depth
        is not bound by the recursion limit.
        """
        root = None
        parent = None
        stack = []
        while True:
            node = self.parse_value(parent)
            if parent is None:
                root = node
            else:
                parent.children.append(node)
            if node.type in _container_types:
                stack.append(node)
            else:
                _finish_property(node)

            # Close finished containers until one expects another member
            parent = None
            while stack:
                parent = self.next_member(stack[-1])
                if parent is not None:
                    break
                stack.pop()
            if parent is None:
                break

        token = self.peek()
        if token.kind != TokenKind.EOF:
            raise JSONCSyntaxError("End of file expected", token.offset)
        return root

    def parse_value(self, parent):
        """Parse a scalar, or open a container.

        Children of an opened container are added by parse_document.
        """
        token = self.peek()
        if token.kind in _containers:
            self.advance()
            return SyntaxNode(_containers[token.kind], token.offset, parent=parent)
        elif token.kind == TokenKind.STRING:
            self.advance()
            return SyntaxNode(NodeType.STRING, token.offset, token.length,
                              parent, _decode(token))
        elif token.kind == TokenKind.NUMBER:
            self.advance()
            return SyntaxNode(NodeType.NUMBER, token.offset, token.length,
                              parent, _decode(token))
        elif token.kind in _literals:
            self.advance()
            type, value = _literals[token.kind]
            return SyntaxNode(type, token.offset, token.length, parent, value)
        raise JSONCSyntaxError("Value expected", token.offset)

    def next_member(self, node):
        """Move to the next member of an open container.

        Returns the parent of the next value: the container itself for
        arrays, a new property for objects. Returns None after consuming
        the closing token.
        """
        if node.type == NodeType.OBJECT:
            closing = TokenKind.CLOSE_BRACE
        else:
            closing = TokenKind.CLOSE_BRACKET
        if node.children and self.peek().kind != closing:
            self.expect(TokenKind.COMMA, "Comma expected")
        if self.peek().kind == closing:
            end = self.advance()
            node.length = end.end - node.offset
            _finish_property(node)
            return None
        if node.type == NodeType.ARRAY:
            return node
        return self.parse_property(node)

    def parse_property(self, parent):
        token = self.peek()
        if token.kind != TokenKind.STRING:
            raise JSONCSyntaxError("Property name expected", token.offset)
        self.advance()
        node = SyntaxNode(NodeType.PROPERTY, token.offset, parent=parent)
        node.children.append(SyntaxNode(
            NodeType.STRING, token.offset, token.length, node, _decode(token)))
        node.colon_offset = self.expect(TokenKind.COLON, "Colon expected").offset
        parent.children.append(node)
        return node


def _finish_property(value):
    "Extend a property over its value once the value is complete."
    prop = value.parent
    if prop is not None and prop.type == NodeType.PROPERTY:
        prop.length = value.end - prop.offset


def parse_tree(text):
    """Parse `text` into a syntax tree and return its root node.

    Raises JSONCSyntaxError if the text is not a single valid value,
    optionally surrounded by whitespace and comments.
    """
    return _Parser(text).parse_document()


def _shallow_value(node):
    if node.type == NodeType.OBJECT:
        return {}
    elif node.type == NodeType.ARRAY:
        return []
    return node.value


def node_value(node):
    """Convert a syntax (sub)tree to plain python values.

    When a key is repeated, the last member wins.
    """
    if node.type == NodeType.PROPERTY:
        node = node.children[1]
    result = _shallow_value(node)
    stack = [(node, result)]
    while stack:
        container, value = stack.pop()
        for child in container.children:
            if container.type == NodeType.OBJECT:
                key, child = child.children[0].value, child.children[1]
                value[key] = _shallow_value(child)
                child_value = value[key]
            else:
                child_value = _shallow_value(child)
                value.append(child_value)
            if child.type in _container_types:
                stack.append((child, child_value))
    return result


def parse(text):
    "Parse `text` into plain python values."
    return node_value(parse_tree(text))


def _is_index(segment):
    return isinstance(segment, int) and not isinstance(segment, bool)


def find_node_at_location(root, path):
    """Find the value node at `path` below `root`.

    String segments select object members (the last one when a key is
    repeated, like `node_value`), integer segments select array elements. Returns None when
    the path does not exist.
    """
    node = root
    for segment in path:
        if node is None:
            return None
        if isinstance(segment, str):
            if node.type != NodeType.OBJECT:
                return None
            for prop in reversed(node.children):
                if prop.children[0].value == segment:
                    node = prop.children[1]
                    break
            else:
                return None
        elif _is_index(segment):
            if node.type != NodeType.ARRAY or not 0 <= segment < len(node.children):
                return None
            node = node.children[segment]
        else:
            return None
    return node
