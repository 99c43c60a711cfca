# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_strings_linewise, edit_distance, lcs, find_middle_snake
from .diff_format import DiffOp, EditEntry, sorted_diff
from .log import DiffArgumentError, DiffFormatError, EditBudgetExceeded, SnakeSearchError
from .patching import patch


__all__ = [
    "__version__",
    "diff", "diff_strings_linewise", "edit_distance", "lcs", "find_middle_snake",
    "patch",
    "DiffOp", "EditEntry", "sorted_diff",
    "DiffArgumentError", "DiffFormatError", "EditBudgetExceeded", "SnakeSearchError",
    ]
