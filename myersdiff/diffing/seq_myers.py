# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

import myersdiff.log
from ..diff_format import SequenceDiffBuilder
from ..log import EditBudgetExceeded
from .snakes import find_middle_snake

__all__ = ["diff_sequence_myers"]


def diff_sequence_myers(A, B, compare=operator.__eq__, max_edit_distance=None):
    """Compute the diff of A and B using Myers' O(ND) algorithm.

    This is the linear space refinement from section 4b of the article:
    the middle snake of the edit graph splits it into a prefix and a
    suffix rectangle, which are diffed in turn until the remaining
    rectangles are trivial.

    Returns a list of edit entries in the order they occur along the
    edit path, i.e. sorted by position in both A and B.

    If max_edit_distance is given and the shortest edit script is longer,
    EditBudgetExceeded is raised.
    """
    N, M = len(A), len(B)
    if max_edit_distance is not None and abs(N - M) > max_edit_distance:
        raise EditBudgetExceeded(max_edit_distance)

    di = SequenceDiffBuilder()
    # Rectangles (i0, j0, i1, j1) of the edit graph left to diff. The prefix
    # is pushed last so that it is processed before the suffix.
    stack = [(0, 0, N, M)]
    # Only the outermost search needs the ceiling, the distances of the
    # subproblems add up to its distance.
    budget = max_edit_distance
    total = None
    while stack:
        rect = stack.pop()
        i0, j0, i1, j1 = rect
        n = i1 - i0
        m = j1 - j0
        if n and m:
            D, (x, y), (u, v) = find_middle_snake(A, B, compare, rect, budget)
            budget = None
            if total is None:
                total = D
            assert x - y == u - v

            if D > 1 or (x != u and y != v):
                # Diff what is left after the snake, then what comes before it
                stack.append((i0 + u, j0 + v, i1, j1))
                stack.append((i0, j0, i0 + x, j0 + y))
            elif m > n:
                # At most one edit: A is a prefix of B, the rest of B is inserted
                stack.append((i0 + n, j0 + n, i1, j1))
            elif m < n:
                # At most one edit: B is a prefix of A, the rest of A is deleted
                stack.append((i0 + m, j0 + m, i1, j1))
        elif n:
            # Only horizontal edges left
            di.removerange(i0, j0, [A[i] for i in range(i0, i1)])
        elif m:
            # Only vertical edges left
            di.addrange(i0, j0, [B[j] for j in range(j0, j1)])

    diff = di.validated()
    myersdiff.log.debug("Myers diff of %d and %d items: %d edits", N, M, len(diff))
    assert total is None or total == len(diff), (
        'Edit script length %d does not match edit distance %d.' % (len(diff), total))
    return diff
