# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .sequences import diff_sequence, diff_strings_linewise, edit_distance, lcs
from .snakes import SnakeResult, find_middle_snake

diff = diff_sequence

__all__ = [
    "diff", "diff_sequence", "diff_strings_linewise",
    "edit_distance", "lcs",
    "SnakeResult", "find_middle_snake",
    ]
