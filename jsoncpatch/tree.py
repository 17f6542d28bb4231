# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import JSONCSyntaxError, warning
from .parser import parse
from .paths import format_path, paths_equal
from .results import Ok, Err, ErrorKind
from .rows import RowType, Row, row_type, rows_for_value


__all__ = ["Node", "build_nodes", "TreeService"]


class Node(object):
    """A selectable node of the document tree.

    `path` addresses the node in the document and `text` holds the
    rows describing it.
    """

    def __init__(self, path, text):
        self.path = tuple(path)
        self.text = list(text)

    def __repr__(self):
        return "Node(%s, %r)" % (format_path(self.path), self.text)


def build_nodes(value):
    """List the nodes of a document value in document order.

    Every object is a node, and so is every scalar array element and a
    scalar document root. Arrays are not nodes themselves, their
    elements are.
    """
    nodes = []
    stack = [((), value)]
    while stack:
        path, value = stack.pop()
        if isinstance(value, dict):
            nodes.append(Node(path, rows_for_value(value)))
            children = [(path + (key,), child) for key, child in value.items()
                        if row_type(child) in RowType.CONTAINERS]
        elif isinstance(value, list):
            children = [(path + (i,), child) for i, child in enumerate(value)]
        else:
            nodes.append(Node(path, [Row(None, value, row_type(value))]))
            continue
        # Reversed so that children come off the stack in document order
        stack.extend(reversed(children))
    return nodes


class TreeService(object):
    """Owns the nodes built from the current document and the selection.

    Selection listeners are called with the newly selected node, or
    None when the selection is cleared.
    """

    def __init__(self):
        self.nodes = []
        self.selected_node = None
        self._listeners = []

    def add_selection_listener(self, callback):
        self._listeners.append(callback)

    def remove_selection_listener(self, callback):
        self._listeners.remove(callback)

    def rebuild(self, text):
        """Rebuild the nodes from document text.

        Keeps the previous nodes when the text does not parse.
        """
        try:
            value = parse(text)
        except JSONCSyntaxError as e:
            warning("Cannot rebuild tree: %s", e)
            return Err(ErrorKind.PARSE, str(e))
        self.nodes = build_nodes(value)
        return Ok(self.nodes)

    def find_node(self, path):
        for node in self.nodes:
            if paths_equal(node.path, path):
                return node
        return None

    def set_selected_node(self, node):
        self.selected_node = node
        for callback in list(self._listeners):
            callback(node)

    def clear_selection(self):
        self.set_selected_node(None)
