# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_filename_args, add_path_arg, add_formatting_args,
    add_prettyprint_args, field_assignment, ConfigBackedParser,
)
from .config import formatting_options
from .documents import DocumentService
from .editing import NodeEditor, DEFAULT_FIELDS
from .log import logger
from .paths import format_path
from .prettyprint import pretty_print_patch_report, PrettyPrintConfig
from .tree import TreeService
from .utils import read_document, setup_std_streams


_description = """Set fields of a node in a JSON document.
Only the edited values change in the document text, comments and
formatting elsewhere are kept as they are.
"""


def main_patch(args):
    fn = args.document
    if fn != "-" and not os.path.exists(fn):
        logger.error("Missing file %s", fn)
        return 1
    if args.in_place and fn == "-":
        logger.error("Cannot edit stdin in place")
        return 1

    documents = DocumentService(read_document(fn), filename=None if fn == "-" else fn)
    tree = TreeService()
    rebuilt = tree.rebuild(documents.text)
    if not rebuilt.ok:
        logger.error("Cannot parse %s: %s", fn, rebuilt.message)
        return 1

    node = tree.find_node(args.path)
    if node is None:
        logger.error("No node at %s in %s", format_path(args.path), fn)
        return 1

    assignments = args.set or []
    # A field set more than once keeps its first position and last value
    fields = list(dict.fromkeys(field for field, _ in assignments))
    editable = getattr(args, 'fields', DEFAULT_FIELDS)
    for field in fields:
        if field not in editable:
            logger.error("Field %r is not editable, editable fields are %s",
                         field, ", ".join(editable))
            return 1

    editor = NodeEditor(documents, tree, fields, formatting_options(args))
    tree.set_selected_node(node)
    editor.start_edit()
    for field, value in assignments:
        editor.set_draft(field, value)
    report = editor.commit().value.patch

    config = PrettyPrintConfig(out=sys.stderr, use_color=args.use_color)
    pretty_print_patch_report(report, args.path, config)

    if args.in_place:
        documents.save()
    elif args.output:
        documents.save(args.output)
    else:
        # Print through print() for capsys, see jsoncshowapp
        print(documents.text, end="")

    return 1 if report.failed else 0


def _build_arg_parser():
    """Creates an argument parser for the jsoncpatch command."""
    parser = ConfigBackedParser(
        'jsoncpatch',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document"])
    add_path_arg(parser)
    parser.add_argument(
        '-s', '--set',
        type=field_assignment,
        action='append',
        metavar='FIELD=VALUE',
        help="set a string field of the node, can be repeated. "
             "Fields are applied in the given order.")
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    output.add_argument(
        '-i', '--in-place',
        action='store_true',
        default=False,
        help="write the patched document back to the input file.")
    add_formatting_args(parser)
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
