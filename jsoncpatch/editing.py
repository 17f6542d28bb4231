# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Edit workflow for the selected node.

A `NodeEditor` is either viewing the selected node, or editing a
draft of its fields. Committing the draft patches the document one
field at a time, publishes the new text, rebuilds the tree and selects
the edited node again so that the view shows what was just written.
"""

from collections import namedtuple

from .log import debug
from .patching import apply_field_edits
from .paths import format_path
from .reconciling import reselect
from .results import Ok, Err, ErrorKind
from .rows import format_scalar, normalize_rows


__all__ = ["EditState", "CommitReport", "NodeEditor", "DEFAULT_FIELDS"]


DEFAULT_FIELDS = ("name", "color")


class EditState:
    "Collection of valid values for the state of a NodeEditor."
    VIEWING = "viewing"
    EDITING = "editing"
    COMMITTING = "committing"


# `patch` is the PatchReport of the field edits, `selection` the
# result of selecting the edited node again.
CommitReport = namedtuple("CommitReport", ["patch", "selection"])


def field_values(node, fields):
    """Initial draft values for `fields` from the rows of `node`.

    Keys match case-insensitively, missing and null values give "".
    """
    values = {}
    for field in fields:
        values[field] = ""
        if node is None:
            continue
        for row in node.text:
            if str(row.key).lower() == field.lower():
                if row.value is not None:
                    values[field] = format_scalar(row.value)
                break
    return values


class NodeEditor(object):

    def __init__(self, documents, tree, fields=DEFAULT_FIELDS, options=None):
        self.documents = documents
        self.tree = tree
        self.fields = tuple(dict.fromkeys(fields))
        self.options = options
        self.state = EditState.VIEWING
        self._reset_draft()
        tree.add_selection_listener(self.on_selection_change)

    @property
    def node(self):
        return self.tree.selected_node

    def _reset_draft(self):
        self._initial = field_values(self.node, self.fields)
        self.draft = dict(self._initial)

    def view(self):
        "Return the projection and path expression of the selected node."
        node = self.node
        if node is None:
            return normalize_rows([]), format_path(None)
        return normalize_rows(node.text), format_path(node.path)

    def on_selection_change(self, node):
        if self.state == EditState.COMMITTING:
            # commit() resets the draft itself once it is done
            return
        self.state = EditState.VIEWING
        self._reset_draft()

    def start_edit(self):
        if self.node is None:
            return False
        if self.state != EditState.EDITING:
            self._reset_draft()
            self.state = EditState.EDITING
        return True

    def set_draft(self, field, value):
        if self.state != EditState.EDITING:
            raise ValueError("Cannot change field %r while %s." % (field, self.state))
        if field not in self.draft:
            raise KeyError(field)
        self.draft[field] = value

    def cancel(self):
        self.state = EditState.VIEWING
        self._reset_draft()

    def changed_fields(self):
        return [(field, self.draft[field]) for field in self.fields
                if self.draft[field] != self._initial[field]]

    def commit(self):
        """Write the changed draft fields into the document.

        Fields are applied in order; a field that cannot be applied is
        skipped. Returns Ok(CommitReport), or Err when not editing. The
        editor is back to viewing afterwards, whatever the outcome.
        """
        if self.state != EditState.EDITING:
            return Err(ErrorKind.STATE, "Nothing to commit while %s." % self.state)

        node = self.node
        self.state = EditState.COMMITTING
        try:
            original = self.documents.text
            report = apply_field_edits(original, node.path, self.changed_fields(), self.options)
            if report.text == original:
                debug("Nothing changed at %s", format_path(node.path))
                selection = Ok(node)
            else:
                self.documents.set_document(report.text, mark_clean=True)
                selection = reselect(self.tree, report.text, node.path)
        finally:
            self.state = EditState.VIEWING
            self._reset_draft()
        return Ok(CommitReport(report, selection))
