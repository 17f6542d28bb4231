# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import debug
from .paths import format_path
from .results import Ok, Err, ErrorKind


__all__ = ["reselect"]


def reselect(tree, new_text, target_path):
    """Rebuild `tree` from `new_text` and select the node at `target_path`.

    Nodes held before the rebuild no longer belong to the tree, so the
    node is looked up again by path. Returns Ok with the selected node,
    or Err when the text does not parse or no node has that path. The
    selection only changes on Ok.
    """
    rebuilt = tree.rebuild(new_text)
    if not rebuilt.ok:
        return rebuilt
    node = tree.find_node(target_path)
    if node is None:
        debug("No node at %s after rebuild, keeping selection", format_path(target_path))
        return Err(ErrorKind.RECONCILE_MISS, "No node at %s" % format_path(target_path))
    tree.set_selected_node(node)
    return Ok(node)
