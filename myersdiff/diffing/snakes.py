# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Utilities for computing 'snakes', or contiguous sequences of equal elements of two sequences.

The middle snake search follows section 4 of Myers' article
"An O(ND) Difference Algorithm and Its Variations". The reverse search
is run on the reversed sequences, so that its k-diagonals have the
same orientation as the forward ones. A diagonal k of the reverse search
then corresponds to the forward diagonal delta - k, where delta = N - M.
"""

import operator
from collections import namedtuple

from ..log import DiffArgumentError, EditBudgetExceeded, SnakeSearchError
from .varray import alloc_V_array

__all__ = ["SnakeResult", "find_middle_snake", "measure_snake_at"]


# edit_distance: length of the shortest edit script
# snake_start, snake_end: (x, y) corners of the middle snake, relative to the searched rectangle
SnakeResult = namedtuple("SnakeResult", ["edit_distance", "snake_start", "snake_end"])


def check_rect(A, B, rect):
    "Return rect as a validated (i0, j0, i1, j1) tuple within A and B."
    if rect is None:
        return (0, 0, len(A), len(B))
    try:
        i0, j0, i1, j1 = rect
    except (TypeError, ValueError):
        raise DiffArgumentError("rect must be a tuple (i0, j0, i1, j1), got %r." % (rect,))
    if not (0 <= i0 <= i1 <= len(A) and 0 <= j0 <= j1 <= len(B)):
        raise DiffArgumentError(
            "rect %r is not within sequences of lengths %d and %d." % (rect, len(A), len(B)))
    return i0, j0, i1, j1


def measure_snake_at(i, j, A, B, compare=operator.__eq__):
    "Length of the run of equal elements A[i+n] == B[j+n] starting at (i, j)."
    N, M = len(A), len(B)
    n = 0
    while i+n < N and j+n < M and compare(A[i+n], B[j+n]):
        n += 1
    return n


def find_middle_snake(A, B, compare=operator.__eq__, rect=None, max_edit_distance=None):
    """Find the length of the shortest edit script and a middle snake.

    Searches the edit graph of A[i0:i1] and B[j0:j1], where rect = (i0, j0, i1, j1)
    defaults to the full sequences, simultaneously from the top left and the
    bottom right corner until the two searches overlap.

    Returns a SnakeResult (D, (x, y), (u, v)) where D is the length of the
    shortest edit script, and the snake from (x, y) to (u, v) lies on a
    shortest path through the edit graph. The coordinates are relative to
    (i0, j0). The snake may be empty, i.e. (x, y) == (u, v).

    If max_edit_distance is given, EditBudgetExceeded is raised as soon as
    it is known that D > max_edit_distance.
    """
    i0, j0, i1, j1 = check_rect(A, B, rect)
    N = i1 - i0
    M = j1 - j0
    delta = N - M
    odd = delta % 2 == 1
    MAX = N + M

    # Furthest reaching x per diagonal, for the forward and the reverse search
    Vf = alloc_V_array(N, M, "Vf")
    Vb = alloc_V_array(N, M, "Vb")
    # Seeds, corresponding to the points (0, -1) and (N, M+1) just outside the graph
    Vf[1] = 0
    Vb[1] = 0

    # Searching from both ends, ceil(MAX/2) rounds is enough to meet
    for D in range((MAX + 1) // 2 + 1):
        if max_edit_distance is not None and 2*D - 1 > max_edit_distance:
            raise EditBudgetExceeded(max_edit_distance)

        # Forward search along k-diagonals
        for k in range(-D, D+1, 2):
            if k == -D or (k != D and Vf[k-1] < Vf[k+1]):
                # Coming from diagonal k+1, the diagonal above k, so keeping x
                x = Vf[k+1]
            else:
                # Coming from diagonal k-1, the diagonal to the left of k, so incrementing x
                x = Vf[k-1] + 1
            y = x - k
            # Start of the snake
            xi, yi = x, y
            while x < N and y < M and compare(A[i0+x], B[j0+y]):
                x += 1
                y += 1
            Vf[k] = x

            # With odd delta the paths can only meet while extending forward,
            # against the reverse D-1 paths
            kr = delta - k
            if odd and -(D-1) <= kr <= D-1 and Vf[k] + Vb[kr] >= N:
                return SnakeResult(2*D - 1, (xi, yi), (x, y))

        if max_edit_distance is not None and 2*D > max_edit_distance:
            raise EditBudgetExceeded(max_edit_distance)

        # Reverse search along k-diagonals, counting x and y from the ends
        for k in range(-D, D+1, 2):
            if k == -D or (k != D and Vb[k-1] < Vb[k+1]):
                x = Vb[k+1]
            else:
                x = Vb[k-1] + 1
            y = x - k
            xi, yi = x, y
            while x < N and y < M and compare(A[i1-1-x], B[j1-1-y]):
                x += 1
                y += 1
            Vb[k] = x

            # With even delta the paths meet while extending in reverse,
            # against the forward D paths
            kf = delta - k
            if not odd and -D <= kf <= D and Vb[k] + Vf[kf] >= N:
                # Flip the snake back into forward coordinates
                return SnakeResult(2*D, (N - x, M - y), (N - xi, M - yi))

    raise SnakeSearchError(
        "Failed to find middle snake for sequences of lengths %d and %d!" % (N, M))
