# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import sys

import colorama

from .diff_format import DiffOp, DiffFormatError


# Indentation offset in pretty-print
IND = "  "

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=None,
            use_color=True,
            ):
        self.out = sys.stdout if out is None else out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

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


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def format_value(v):
    "Format a sequence item as a single line of text."
    if isinstance(v, str):
        return v.rstrip("\r\n")
    return repr(v)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    else:
        pretty_print_key_value(k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_line(prefix, value, config):
    config.out.write("%s%s%s\n" % (prefix, format_value(value), config.RESET))


def pretty_print_diff(a, b, di, config=DefaultConfig):
    """Pretty-print a sequence diff, interleaved with the unchanged items.

    Within each block of changes between two unchanged items,
    deleted items are printed before inserted ones.
    """
    removed = set(e.old_index for e in di if e.op == DiffOp.REMOVE)
    added = set(e.new_index for e in di if e.op == DiffOp.ADD)
    N, M = len(a), len(b)
    i = 0
    j = 0
    while i < N or j < M:
        if i < N and i in removed:
            pretty_print_line(config.REMOVE, a[i], config)
            i += 1
        elif j < M and j in added:
            pretty_print_line(config.ADD, b[j], config)
            j += 1
        elif i < N and j < M:
            pretty_print_line(config.KEEP, a[i], config)
            i += 1
            j += 1
        else:
            raise DiffFormatError(
                "Diff does not transform a sequence of length {} into one of length {}.".format(
                    N, M))


sequence_diff_header = """\
myersdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_file_diff(afn, bfn, a, b, di, config=DefaultConfig):
    """Pretty-print a line based diff of two files

    Parameters
    ----------

    afn: str
        Filename of a, the base file
    bfn: str
        Filename of b, the updated file
    a: list
        The lines of the base file
    b: list
        The lines of the updated file
    di: diff
        The diff object describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if di:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(sequence_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_diff(a, b, di, config)
