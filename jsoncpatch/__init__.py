# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .documents import DocumentService
from .editing import NodeEditor, EditState
from .edits import TextEdit, apply_edits
from .parser import parse, parse_tree, find_node_at_location
from .patching import (
    Deleted, FormattingOptions, modify, apply_field_edit, apply_field_edits)
from .paths import format_path, parse_path, paths_equal
from .reconciling import reselect
from .results import Ok, Err, ErrorKind
from .rows import Row, normalize_rows
from .tree import Node, TreeService


__all__ = [
    "__version__",
    "parse", "parse_tree", "find_node_at_location",
    "TextEdit", "apply_edits",
    "Deleted", "FormattingOptions", "modify",
    "apply_field_edit", "apply_field_edits",
    "format_path", "parse_path", "paths_equal",
    "Row", "normalize_rows",
    "Node", "TreeService", "DocumentService",
    "reselect",
    "NodeEditor", "EditState",
    "Ok", "Err", "ErrorKind",
    ]
