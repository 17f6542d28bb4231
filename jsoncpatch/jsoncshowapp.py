# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_path_arg, add_prettyprint_args,
    ConfigBackedParser,
)
from .log import logger
from .paths import format_path
from .prettyprint import pretty_print_node, PrettyPrintConfig
from .tree import TreeService
from .utils import read_document, setup_std_streams


_description = """Show a node of a JSON document in the terminal.
Prints the scalar fields of the node and its path expression.
Comments and trailing commas are allowed in the document.
"""


def main_show(args):
    fn = args.document
    if fn != "-" and not os.path.exists(fn):
        logger.error("Missing file %s", fn)
        return 1

    tree = TreeService()
    rebuilt = tree.rebuild(read_document(fn))
    if not rebuilt.ok:
        logger.error("Cannot parse %s: %s", fn, rebuilt.message)
        return 1

    node = tree.find_node(args.path)
    if node is None:
        logger.error("No node at %s in %s", format_path(args.path), fn)
        return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = PrettyPrintConfig(out=Printer(), use_color=args.use_color)
    pretty_print_node(node, config)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the jsoncshow command."""
    parser = ConfigBackedParser(
        'jsoncshow',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document"])
    add_path_arg(parser, required=False)
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
