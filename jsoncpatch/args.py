# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import get_defaults_for_argparse, build_config, entrypoint_configurables
from .log import init_logging, set_jsoncpatch_log_level
from .paths import parse_path


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsoncpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsoncpatch_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v) or '{}'
        elif v is None:
            output[k] = '<unset>'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def document_path(value):
    """Argparse type for a path into the document.

    Accepts $["key"][0] expressions and /key/0 pointers.
    """
    try:
        return parse_path(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def field_assignment(value):
    "Argparse type for FIELD=VALUE arguments."
    field, sep, new_value = value.partition('=')
    if not sep or not field:
        raise argparse.ArgumentTypeError(
            "expected FIELD=VALUE, got %r" % value)
    return field, new_value


def add_generic_args(parser):
    """Adds a set of arguments common to all jsoncpatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


filename_help = {
    "document": "The document filename, or - to read from stdin.",
    }


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_path_arg(parser, required=True):
    parser.add_argument(
        'path',
        type=document_path,
        nargs=None if required else '?',
        default=(),
        help='path of the node, either as $["key"][0] or as /key/0. '
             'Default is the document root.')


def add_formatting_args(parser):
    """Adds arguments controlling the layout of inserted text.
    """
    parser.add_argument(
        '--tab-size',
        dest='tab_size',
        type=int,
        default=2,
        help="indentation width used when a new member has no sibling "
             "to copy the indentation from.")
    parser.add_argument(
        '--use-tabs',
        dest='insert_spaces',
        action='store_false',
        default=True,
        help="indent new members with tabs instead of spaces.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )
