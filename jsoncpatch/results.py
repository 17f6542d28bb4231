# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Explicit step results for the edit pipeline.

Each step returns either `Ok(value)` or `Err(kind, message)` and the
caller decides whether to continue, stop or report.
"""

from collections import namedtuple


class ErrorKind:
    "Collection of valid values for the kind field of Err results."
    PARSE = "parse"
    RESOLUTION = "resolution"
    RECONCILE_MISS = "reconcile_miss"
    STATE = "state"


class Ok(namedtuple("Ok", ["value"])):
    __slots__ = ()
    ok = True


class Err(namedtuple("Err", ["kind", "message"])):
    __slots__ = ()
    ok = False
