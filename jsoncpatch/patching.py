# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Path addressed edits of JSON-with-comments documents.

Edits are computed against the document text itself: only the value
span of the addressed member (or the insertion point of a new member)
changes, everything else, including comments, whitespace and key
order, is left exactly as it was.
"""

import json
from collections import namedtuple

from .edits import op_insert, op_replace, op_remove, apply_edits
from .log import JSONCSyntaxError, PatchError, debug
from .parser import NodeType, parse_tree, find_node_at_location
from .paths import format_path, is_index
from .results import Ok, Err, ErrorKind
from .scanner import TokenKind, COMMENTS, scan, significant_tokens, get_eol


__all__ = ["Deleted", "FormattingOptions", "PatchReport", "modify",
           "apply_field_edit", "apply_field_edits"]


# Sentinel value to request removal of a member
Deleted = object()


class FormattingOptions(namedtuple(
        "FormattingOptions", ["tab_size", "insert_spaces", "eol"],
        defaults=(2, True, None))):
    """How inserted text is laid out.

    `eol` of None means the line ending already used by the document.
    """
    __slots__ = ()

    @property
    def indent_unit(self):
        return " " * self.tab_size if self.insert_spaces else "\t"


PatchReport = namedtuple("PatchReport", ["text", "applied", "failed"])


def _line_start(text, offset):
    return max(text.rfind("\n", 0, offset), text.rfind("\r", 0, offset)) + 1


def _line_indent(text, offset):
    start = end = _line_start(text, offset)
    while end < offset and text[end] in " \t":
        end += 1
    return text[start:end]


def _starts_line(text, offset):
    "Whether only indentation precedes offset on its line."
    return not text[_line_start(text, offset):offset].strip(" \t")


def _serialize(value, indent, options, eol):
    "Serialize value for insertion on a line indented by indent."
    try:
        if isinstance(value, (dict, list)) and value:
            dumped = json.dumps(value, indent=options.indent_unit,
                                ensure_ascii=False, allow_nan=False)
            return (eol + indent).join(dumped.split("\n"))
        return json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise PatchError("Cannot serialize value %r: %s" % (value, e))


def _line_tail(text, offset):
    """Tokens after offset on the same line.

    Stops before the first significant token that is not a comma.
    """
    tail = []
    for token in scan(text, offset):
        if token.kind in (TokenKind.LINE_BREAK, TokenKind.EOF):
            break
        if token.kind == TokenKind.BLOCK_COMMENT and ("\n" in token.text or "\r" in token.text):
            break
        if token.kind not in COMMENTS and token.kind not in (TokenKind.WHITESPACE, TokenKind.COMMA):
            break
        tail.append(token)
    return tail


def _fill_empty(text, container, render, options, eol):
    base = _line_indent(text, container.offset)
    indent = base + options.indent_unit
    inner_start = container.offset + 1
    inner = text[inner_start:container.end - 1]
    member = eol + indent + render(indent)
    if not inner.strip():
        return [op_replace(inner_start, len(inner), member + eol + base)]
    # Keep comments inside the container after the new member
    return [op_insert(inner_start, member)]


def _append_member(text, container, render, options, eol):
    children = container.children
    if not children:
        return _fill_empty(text, container, render, options, eol)

    last = children[-1]
    indent = _line_indent(text, last.offset)
    tail = _line_tail(text, last.end)
    comma = next((t for t in tail if t.kind == TokenKind.COMMA), None)

    if not _starts_line(text, last.offset):
        # Members laid out on a single line
        if comma is not None:
            return [op_insert(comma.end, " " + render(indent) + ",")]
        return [op_insert(last.end, ", " + render(indent))]

    member = eol + indent + render(indent)
    if comma is not None:
        # Document uses trailing commas, keep doing so
        anchor = max(t.end for t in tail if t.kind != TokenKind.WHITESPACE)
        return [op_insert(anchor, member + ",")]
    comments = [t for t in tail if t.kind in COMMENTS]
    if comments:
        return [op_insert(last.end, ","), op_insert(comments[-1].end, member)]
    return [op_insert(last.end, "," + member)]


def _insert_before(text, container, index, render, eol):
    child = container.children[index]
    indent = _line_indent(text, child.offset)
    if _starts_line(text, child.offset):
        return [op_insert(child.offset, render(indent) + "," + eol + indent)]
    return [op_insert(child.offset, render(indent) + ", ")]


def _remove_child(text, container, index):
    children = container.children
    node = children[index]
    if index > 0:
        return [op_remove(children[index - 1].end, node.end)]
    if len(children) > 1:
        return [op_remove(node.offset, children[1].offset)]

    end = node.end
    following = next(significant_tokens(text, end))
    if following.kind == TokenKind.COMMA:
        end = following.end
    inner_start, inner_end = container.offset + 1, container.end - 1
    if not (text[inner_start:node.offset] + text[end:inner_end]).strip():
        return [op_remove(inner_start, inner_end)]
    return [op_remove(node.offset, end)]


def _compute_edits(text, root, path, value, options, is_array_insertion):
    eol = options.eol or get_eol(text)
    path = list(path)
    if not path and value is Deleted:
        raise PatchError("Cannot remove the document root")

    # Walk up to the deepest existing container, wrapping the value
    # into the containers that are missing on the way.
    parent = None
    last = None
    while path:
        last = path.pop()
        parent = find_node_at_location(root, path)
        if parent is None and value is not Deleted:
            value = {last: value} if isinstance(last, str) else [value]
        else:
            break

    def render(indent):
        return _serialize(value, indent, options, eol)

    if parent is None:
        if value is Deleted:
            return []
        if root is None:
            return [op_replace(0, len(text), render(""))]
        return [op_replace(root.offset, root.length, render(_line_indent(text, root.offset)))]

    if parent.type == NodeType.OBJECT and isinstance(last, str):
        # Repeated keys resolve to the last member
        index = next((i for i in reversed(range(len(parent.children)))
                      if parent.children[i].children[0].value == last), None)
        if index is not None:
            if value is Deleted:
                return _remove_child(text, parent, index)
            prop = parent.children[index]
            target = prop.children[1]
            return [op_replace(target.offset, target.length, render(_line_indent(text, prop.offset)))]
        if value is Deleted:
            return []
        key = json.dumps(last, ensure_ascii=False)

        def render_property(indent):
            return "%s: %s" % (key, render(indent))

        return _append_member(text, parent, render_property, options, eol)

    if parent.type == NodeType.ARRAY and is_index(last):
        children = parent.children
        if value is Deleted:
            if 0 <= last < len(children):
                return _remove_child(text, parent, last)
            return []
        if last == -1 or (is_array_insertion and last == len(children)):
            return _append_member(text, parent, render, options, eol)
        if not 0 <= last < len(children):
            raise PatchError("Index %d out of range at %s" % (last, format_path(path)))
        if is_array_insertion:
            return _insert_before(text, parent, last, render, eol)
        target = children[last]
        return [op_replace(target.offset, target.length, render(_line_indent(text, target.offset)))]

    raise PatchError("Cannot %s %s %r in %s at %s" % (
        "remove" if value is Deleted else "set",
        "index" if is_index(last) else "property",
        last, parent.type, format_path(path)))


def modify(text, path, value, options=None, is_array_insertion=False):
    """Compute the text edits that set the value at `path` in `text`.

    An existing member or element has its value span replaced. A new
    object member is added after the last member using the indentation
    of its siblings. Containers missing along the path are created.
    Passing `Deleted` as value removes the member or element along with
    its separating comma. With `is_array_insertion`, an integer path
    segment inserts before that index instead of replacing, and index
    -1 always appends.

    Returns a list of TextEdit to pass to `apply_edits`.

    Raises JSONCSyntaxError if the text does not parse, and PatchError
    if the path addresses something that cannot hold the value.
    """
    if options is None:
        options = FormattingOptions()
    root = parse_tree(text) if text.strip() else None
    return _compute_edits(text, root, path, value, options, is_array_insertion)


def apply_field_edit(text, base_path, field, value, options=None):
    """Set `document[...base_path, field]` to `value`.

    `base_path` must address an existing object. Returns Ok with the
    new document text, or Err when the text does not parse or the base
    path cannot be resolved. The input text is never partially changed.
    """
    if options is None:
        options = FormattingOptions()
    try:
        root = parse_tree(text)
    except JSONCSyntaxError as e:
        return Err(ErrorKind.PARSE, str(e))

    base = find_node_at_location(root, base_path)
    if base is None or base.type != NodeType.OBJECT:
        return Err(ErrorKind.RESOLUTION, "No object at %s" % format_path(base_path))

    try:
        edits = _compute_edits(text, root, list(base_path) + [field], value, options, False)
        patched = apply_edits(text, edits)
        # Never hand out text that no longer parses
        parse_tree(patched)
    except JSONCSyntaxError as e:
        return Err(ErrorKind.PARSE, "Editing %r breaks the document: %s" % (field, e))
    except PatchError as e:
        return Err(ErrorKind.RESOLUTION, str(e))
    return Ok(patched)


def apply_field_edits(text, base_path, fields, options=None):
    """Apply several field edits in order, each against the text
    produced by the previous one.

    `fields` is a mapping or a sequence of (field, value) pairs.
    Fields that fail are skipped and the remaining ones still apply.
    """
    if isinstance(fields, dict):
        fields = fields.items()
    applied = []
    failed = {}
    for field, value in fields:
        result = apply_field_edit(text, base_path, field, value, options)
        if result.ok:
            text = result.value
            applied.append(field)
        else:
            debug("Skipping edit of %r at %s: %s", field, format_path(base_path), result.message)
            failed[field] = result
    return PatchReport(text, applied, failed)
