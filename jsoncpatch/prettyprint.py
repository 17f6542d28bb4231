# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama

from .paths import format_path
from .rows import normalize_rows


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(v):
    "Format simple value for printing."
    if isinstance(v, str):
        return v
    return pprint.pformat(v)


def pretty_print_header(title, config=DefaultConfig):
    config.out.write("%s%s:%s\n" % (config.INFO, title, config.RESET))


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        config.out.write("%s%s:\n" % (prefix, k))
        pretty_print_dict(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_multiline(vstr, prefix+IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, vstr))


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_node(node, config=DefaultConfig):
    "Print the content and path of a selected node (or of no node)."
    rows = node.text if node is not None else []
    path = node.path if node is not None else None
    pretty_print_header("content", config)
    pretty_print_multiline(normalize_rows(rows), IND, config)
    pretty_print_header("json path", config)
    pretty_print_multiline(format_path(path), IND, config)


def pretty_print_patch_report(report, path, config=DefaultConfig):
    "Print which field edits were applied at path and which failed."
    pretty_print_header("edits at %s" % format_path(path), config)
    for field in report.applied:
        config.out.write("%s%s%s\n" % (config.ADD, field, config.RESET))
    for field, err in report.failed.items():
        config.out.write("%s%s: %s%s\n" % (config.REMOVE, field, err.message, config.RESET))
