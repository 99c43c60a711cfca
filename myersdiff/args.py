# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing.sequences import legal_diff_sequence_algorithms
from .log import init_logging, set_myersdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_myersdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_myersdiff_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
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


def non_negative_int(value):
    "Argparse type for a non-negative integer."
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not an integer' % (value,))
    if n < 0:
        raise argparse.ArgumentTypeError('%r is negative' % (value,))
    return n


def add_generic_args(parser):
    """Adds a set of arguments common to all myersdiff commands.
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


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    parser.add_argument(
        '-A', '--algorithm',
        default='myers',
        choices=legal_diff_sequence_algorithms,
        help="the sequence diff algorithm to use.")
    parser.add_argument(
        '--max-edit-distance',
        default=None,
        type=non_negative_int,
        help="give up if the shortest edit script is longer than this.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--color',
        dest='color',
        action='store_true',
        default=True,
        help="color the output (default).")
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        help="prevent use of ANSI color code escapes for text output")


def prettyprint_config_from_args(args, **kwargs):
    from .prettyprint import PrettyPrintConfig

    return PrettyPrintConfig(
        use_color=getattr(args, 'color', True),
        **kwargs
    )
