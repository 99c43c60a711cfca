# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..log import DiffArgumentError
from ..utils import as_text_lines, is_indexable_sequence
from .lcs import lcs_indices_from_diff
from .seq_bruteforce import diff_sequence_bruteforce
from .seq_myers import diff_sequence_myers

__all__ = ["diff_sequence", "diff_strings_linewise", "lcs", "edit_distance"]


legal_diff_sequence_algorithms = ("myers", "bruteforce")
diff_sequence_algorithm = "myers"


def check_sequence_args(a, b, max_edit_distance=None):
    "Raise DiffArgumentError unless a and b are sequences that can be diffed."
    for name, seq in (("old", a), ("new", b)):
        if not is_indexable_sequence(seq):
            raise DiffArgumentError(
                "Argument {} must be an indexable sequence, got {}.".format(
                    name, type(seq).__name__))
        try:
            # len() refuses negative lengths with a ValueError
            n = len(seq)
        except (TypeError, ValueError) as e:
            raise DiffArgumentError("Argument {} has no valid length: {}".format(name, e))
        if n:
            # Check that the length is consistent with the indexing
            try:
                seq[0]
                seq[n - 1]
            except (IndexError, KeyError, TypeError) as e:
                raise DiffArgumentError(
                    "Argument {} of length {} cannot be indexed over [0, {}): {}".format(
                        name, n, n, e))
    if max_edit_distance is not None:
        if not isinstance(max_edit_distance, int) or max_edit_distance < 0:
            raise DiffArgumentError(
                "max_edit_distance must be a non-negative integer, got {!r}.".format(
                    max_edit_distance))


def diff_sequence(a, b, compare=operator.__eq__, max_edit_distance=None, algorithm=None):
    """Compute a shallow diff of two sequences.

    I.e. these algorithms do not recursively diff elements of the sequences.

    Returns a list of edit entries. Deleting the removed entries from a,
    and inserting the added entries, transforms a into b.

    This is a wrapper for alternative diff implementations, selected by
    algorithm or else the module level diff_sequence_algorithm.
    """
    check_sequence_args(a, b, max_edit_distance)
    if algorithm is None:
        algorithm = diff_sequence_algorithm
    if algorithm == "myers":
        return diff_sequence_myers(a, b, compare, max_edit_distance)
    elif algorithm == "bruteforce":
        return diff_sequence_bruteforce(a, b, compare, max_edit_distance)
    else:
        raise DiffArgumentError("Unknown diff_sequence_algorithm {}.".format(algorithm))


def diff_strings_linewise(a, b, max_edit_distance=None, algorithm=None):
    """Do a line-wise diff of two strings
    """
    assert isinstance(a, str) and isinstance(b, str), (
        'Arguments need to be string types. Got %r and %r' % (a, b))
    if a == b:
        return []
    lines_a = as_text_lines(a)
    lines_b = as_text_lines(b)
    return diff_sequence(lines_a, lines_b,
                         max_edit_distance=max_edit_distance, algorithm=algorithm)


def lcs(a, b, compare=operator.__eq__):
    "Compute a longest common subsequence of a and b, as a list of elements of a."
    d = diff_sequence(a, b, compare)
    A_indices, _ = lcs_indices_from_diff(a, b, d)
    return [a[i] for i in A_indices]


def edit_distance(a, b, compare=operator.__eq__):
    "Compute the number of insertions and deletions needed to transform a into b."
    return len(diff_sequence(a, b, compare))
