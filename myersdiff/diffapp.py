# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

import myersdiff.log
from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args,
    ConfigBackedParser, prettyprint_config_from_args,
    )
from .diffing.sequences import diff_sequence
from .log import DiffArgumentError, EditBudgetExceeded
from .prettyprint import pretty_print_file_diff
from .utils import EXPLICIT_MISSING_FILE, read_lines, setup_std_streams


_description = "Compute the line-based difference between two text files."


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    base = args.base
    remote = args.remote

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if (isinstance(fn, str) and not os.path.exists(fn) and
                fn != EXPLICIT_MISSING_FILE):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_lines(base, on_null='empty')
        b = read_lines(remote, on_null='empty')
    except UnicodeDecodeError as e:
        myersdiff.log.error("Cannot read %s and %s as UTF-8 text: %s", base, remote, e)
        return 1

    try:
        d = diff_sequence(a, b,
                          max_edit_distance=args.max_edit_distance,
                          algorithm=args.algorithm)
    except (DiffArgumentError, EditBudgetExceeded) as e:
        myersdiff.log.error("Cannot diff %s and %s: %s", base, remote, e)
        return 1

    if output:
        with open(output, "w") as df:
            json.dump([e._asdict() for e in d], df, indent=2, separators=(",", ": "))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_file_diff(base, remote, a, b, d, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the myersdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "base", help="the base filename.",
    )
    parser.add_argument(
        "remote", help="the remote modified filename.",
    )

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the edit script is written to this file as JSON. "
             "Otherwise the diff is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser(prog='myersdiff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
