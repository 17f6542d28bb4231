# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import math
from collections import namedtuple


__all__ = ["Row", "RowType", "row_type", "rows_for_value", "normalize_rows"]


class RowType:
    "Collection of valid values for the type field of rows."
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"

    CONTAINERS = (OBJECT, ARRAY)


# One field of a node: key is None for a bare scalar node
Row = namedtuple("Row", ["key", "value", "type"])


def row_type(value):
    # bool before int, bool subclasses int
    if isinstance(value, bool):
        return RowType.BOOLEAN
    elif value is None:
        return RowType.NULL
    elif isinstance(value, (int, float)):
        return RowType.NUMBER
    elif isinstance(value, str):
        return RowType.STRING
    elif isinstance(value, dict):
        return RowType.OBJECT
    elif isinstance(value, list):
        return RowType.ARRAY
    raise ValueError("Invalid value type for a row: {}".format(type(value).__name__))


def rows_for_value(value):
    """Flatten a value into the rows describing it.

    Objects give one row per member, nested containers are described
    by their child count. Anything else gives a single keyless row.
    """
    if not isinstance(value, dict):
        return [Row(None, value, row_type(value))]
    rows = []
    for key, child in value.items():
        t = row_type(child)
        if t in RowType.CONTAINERS:
            rows.append(Row(key, len(child), t))
        else:
            rows.append(Row(key, child, t))
    return rows


def _plain_number(value):
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def format_scalar(value):
    "Format a scalar the way javascript's String() does."
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, float):
        return str(_plain_number(value))
    return str(value)


def normalize_rows(rows):
    """Render the rows of a node as text.

    A single keyless row is a bare scalar and renders as the value
    itself. Otherwise the keyed scalar rows render as an object with
    two space indentation; object and array rows are left out.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and rows[0].key is None:
        return format_scalar(rows[0].value)

    obj = {}
    for row in rows:
        if row.type in RowType.CONTAINERS or row.key is None:
            continue
        obj[row.key] = _plain_number(row.value)
    return json.dumps(obj, indent=2, ensure_ascii=False)
