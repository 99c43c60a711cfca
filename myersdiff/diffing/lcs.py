# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import DiffOp, SequenceDiffBuilder


def diff_from_lcs(A, B, A_indices, B_indices):
    """Compute the diff of A and B, given indices of their lcs."""
    di = SequenceDiffBuilder()
    N, M = len(A), len(B)
    llcs = len(A_indices)
    assert llcs == len(B_indices)
    # x,y = how many symbols we have consumed from A and B
    x = 0
    y = 0
    for r in range(llcs):
        i = A_indices[r]
        j = B_indices[r]
        if i > x:
            di.removerange(x, y, [A[k] for k in range(x, i)])
        if j > y:
            di.addrange(i, y, [B[k] for k in range(y, j)])
        x = i + 1
        y = j + 1
    if x < N:
        di.removerange(x, y, [A[k] for k in range(x, N)])
    if y < M:
        di.addrange(N, y, [B[k] for k in range(y, M)])
    return di.validated()


def lcs_indices_from_diff(A, B, diff):
    """Compute indices of the lcs of A and B from a diff of A and B.

    Returns two lists (A_indices, B_indices) of the positions
    of the elements that are kept by the diff.
    """
    removed = set(e.old_index for e in diff if e.op == DiffOp.REMOVE)
    added = set(e.new_index for e in diff if e.op == DiffOp.ADD)
    A_indices = [i for i in range(len(A)) if i not in removed]
    B_indices = [j for j in range(len(B)) if j not in added]
    assert len(A_indices) == len(B_indices), 'diff does not describe a common subsequence'
    return A_indices, B_indices
