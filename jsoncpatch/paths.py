# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re


__all__ = ["format_path", "parse_path", "paths_equal", "split_path"]


def is_index(segment):
    "Whether a path segment addresses an array element."
    return isinstance(segment, int) and not isinstance(segment, bool)


def format_path(path=None):
    """Render a path as a bracketed path expression.

    Integer segments are written bare and string segments are wrapped
    in double quotes, e.g. ``$["fruits"][0]``. Quotes inside keys are
    not escaped. The document root renders as ``$``.
    """
    if not path:
        return "$"
    segments = [str(seg) if is_index(seg) else '"%s"' % seg for seg in path]
    return "$[%s]" % "][".join(segments)


def paths_equal(a, b):
    """Compare two paths segment by segment.

    A numeric segment never equals a string segment, so ``[1]`` and
    ``["1"]`` are different paths.
    """
    a = () if a is None else a
    b = () if b is None else b
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if is_index(x) != is_index(y) or x != y:
            return False
    return True


_segment_re = re.compile(r'\[(?:(\d+)|"([^"]*)")\]')


def parse_path(expr):
    """Parse a path given on the command line into a tuple of segments.

    Accepts the bracketed form produced by `format_path`, or a
    '/'-separated pointer where all-digit segments become indices.
    """
    expr = expr.strip()
    if not expr.startswith("$"):
        return tuple(int(s) if s.isdigit() else s for s in split_path(expr))
    segments = []
    pos = 1
    while pos < len(expr):
        m = _segment_re.match(expr, pos)
        if m is None:
            raise ValueError("Invalid path expression: %r" % expr)
        index, key = m.groups()
        segments.append(int(index) if index is not None else key)
        pos = m.end()
    return tuple(segments)


def split_path(path):
    "Split a path on the form '/foo/bar' into ['foo','bar']."
    return [x for x in path.strip("/").split("/") if x]

