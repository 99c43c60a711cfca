# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from itertools import product

import pytest

from myersdiff.diffing.seq_bruteforce import bruteforce_llcs
from myersdiff.diffing.snakes import SnakeResult, find_middle_snake, measure_snake_at
import myersdiff.diffing.varray
from myersdiff.diffing.varray import DebuggingArray, DiagonalArray, alloc_V_array
from myersdiff.log import DiffArgumentError, EditBudgetExceeded


def ses(A, B):
    "Length of the shortest edit script, by brute force."
    return len(A) + len(B) - 2*bruteforce_llcs(A, B)


def all_strings(alphabet, maxlen):
    for n in range(maxlen + 1):
        for s in product(alphabet, repeat=n):
            yield "".join(s)


def test_diagonal_array():
    V = DiagonalArray(3)
    assert len(V) == 7
    assert V[0] is None
    V[-3] = 1
    V[3] = 2
    V[0] = 5
    assert V[-3] == 1
    assert V[3] == 2
    assert V[0] == 5
    with pytest.raises(IndexError):
        V[4]
    with pytest.raises(IndexError):
        V[-4] = 0
    with pytest.raises(ValueError):
        DiagonalArray(-1)


def test_diagonal_arrays_are_sized_per_call():
    assert alloc_V_array(2, 3, "V").size == 6
    assert alloc_V_array(0, 0, "V").size == 1
    # Two arrays for the same problem never share storage
    V1 = alloc_V_array(1, 1, "Vf")
    V2 = alloc_V_array(1, 1, "Vb")
    V1[1] = 7
    assert V2[1] is None


def test_debugging_array_checks_reads(capsys):
    V = DebuggingArray(2, "V")
    V[1] = 0
    assert V[1] == 0
    with pytest.raises(RuntimeError):
        V[0]
    out, err = capsys.readouterr()
    assert "Alloc V[-2:2]" in out
    assert "V[1] <- 0 (first access)" in out


def test_find_middle_snake_reads_only_written_diagonals(monkeypatch, capsys):
    monkeypatch.setattr(myersdiff.diffing.varray, "DEBUGGING", 1)
    for A, B in [("abcab", "ayb"), ("xaxcxabc", "abcy"), ("", "ab"), ("abc", "abc")]:
        D, _, _ = find_middle_snake(A, B)
        assert D == ses(A, B)
    out, err = capsys.readouterr()
    assert "Alloc Vf" in out


def test_measure_snake_at():
    assert measure_snake_at(0, 0, "abc", "abd") == 2
    assert measure_snake_at(1, 0, "xab", "abz") == 2
    assert measure_snake_at(0, 0, "abc", "xbc") == 0
    assert measure_snake_at(3, 0, "abc", "abc") == 0


def test_find_middle_snake_trivial_cases():
    assert find_middle_snake([], []) == SnakeResult(0, (0, 0), (0, 0))
    assert find_middle_snake(["x"], []) == SnakeResult(1, (1, 0), (1, 0))
    assert find_middle_snake([], ["x"]) == SnakeResult(1, (0, 1), (0, 1))
    assert find_middle_snake(list("abc"), list("abc")) == SnakeResult(0, (0, 0), (3, 3))


def test_find_middle_snake_with_neil_fraser_cases():
    # Case from neil.fraser.name/writing/diff/
    assert find_middle_snake(list("abcab"), list("ayb")).edit_distance == 3+1
    assert find_middle_snake(list("xaxcxabc"), list("abcy")).edit_distance == 5+1


def test_find_middle_snake_worked_example():
    old = [1, 4, 27, 21, 23, 24, 26, 28, 13]
    new = [1, 4, 20, 21, 22, 23, 24, 25, 26, 13]
    assert find_middle_snake(old, new).edit_distance == ses(old, new) == 5


def test_find_middle_snake_exhaustive():
    strings = list(all_strings("ab", 4))
    for A, B in product(strings, strings):
        D, (x, y), (u, v) = find_middle_snake(A, B)
        N, M = len(A), len(B)
        assert D == ses(A, B)

        # The snake lies on a single diagonal inside the edit graph
        assert x - y == u - v
        assert 0 <= x <= u <= N
        assert 0 <= y <= v <= M
        assert all(A[x+i] == B[y+i] for i in range(u - x))

        # and on a shortest path through it
        assert ses(A[:x], B[:y]) + ses(A[u:], B[v:]) == D


def test_find_middle_snake_in_rect():
    A = list("xxabcabyy")
    B = list("zaybzz")
    rect = (2, 1, 7, 4)
    assert find_middle_snake(A, B, rect=rect) == find_middle_snake(A[2:7], B[1:4])


def test_find_middle_snake_invalid_rect():
    with pytest.raises(DiffArgumentError):
        find_middle_snake("abc", "abc", rect=(0, 0, 4, 3))
    with pytest.raises(DiffArgumentError):
        find_middle_snake("abc", "abc", rect=(2, 0, 1, 3))
    with pytest.raises(DiffArgumentError):
        find_middle_snake("abc", "abc", rect=(0, 0))


def test_find_middle_snake_with_compare():
    def compare(a, b):
        return a.lower() == b.lower()
    assert find_middle_snake("ABC", "abc", compare).edit_distance == 0
    assert find_middle_snake("ABC", "abd", compare).edit_distance == 2


def test_find_middle_snake_max_edit_distance():
    assert find_middle_snake("abc", "xyz", max_edit_distance=6).edit_distance == 6
    with pytest.raises(EditBudgetExceeded) as excinfo:
        find_middle_snake("abc", "xyz", max_edit_distance=5)
    assert excinfo.value.max_edit_distance == 5
    assert find_middle_snake("abc", "abc", max_edit_distance=0).edit_distance == 0
    with pytest.raises(EditBudgetExceeded):
        find_middle_snake("abc", "abd", max_edit_distance=1)
