# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from myersdiff import patch
from myersdiff.diff_format import op_add, op_remove, EditEntry
from myersdiff.log import DiffFormatError


def test_patch_str():
    # Test +, single item insertion
    assert patch("", [op_add(0, 0, "3")]) == "3"
    assert patch("42", [op_add(0, 0, "3"), op_remove(1, 2, "2")]) == "34"

    # Test -, single item deletion
    assert patch("3", [op_remove(0, 0, "3")]) == ""
    assert patch("425", [op_remove(0, 0, "4")]) == "25"
    assert patch("425", [op_remove(1, 1, "2")]) == "45"
    assert patch("425", [op_remove(2, 2, "5")]) == "42"

    # Replace by delete-then-insert
    assert patch("world", [op_remove(0, 0, "w"), op_add(1, 0, "W")]) == "World"


def test_patch_list():
    # Test +, single item insertion
    assert patch([], [op_add(0, 0, 3)]) == [3]
    assert patch([], [op_add(0, 0, 3), op_add(0, 1, 4)]) == [3, 4]
    assert patch([], [op_add(0, 0, 3), op_add(0, 1, 4), op_add(0, 2, 5)]) == [3, 4, 5]

    # Test -, single item deletion
    assert patch([3], [op_remove(0, 0, 3)]) == []
    assert patch([5, 6, 7], [op_remove(0, 0, 5)]) == [6, 7]
    assert patch([5, 6, 7], [op_remove(1, 1, 6)]) == [5, 7]
    assert patch([5, 6, 7], [op_remove(2, 2, 7)]) == [5, 6]
    assert patch([5, 6, 7], [op_remove(0, 0, 5), op_remove(2, 1, 7)]) == [6]

    # Entry order does not matter
    d = [op_add(3, 3, 8), op_remove(0, 0, 5), op_add(1, 0, 9)]
    assert patch([5, 6, 7], d) == [9, 6, 7, 8]
    assert patch([5, 6, 7], list(reversed(d))) == [9, 6, 7, 8]


def test_patch_does_not_modify_input():
    a = [1, 2, 3]
    assert patch(a, [op_remove(1, 1, 2)]) == [1, 3]
    assert a == [1, 2, 3]
    assert patch((1, 2), [op_add(2, 2, 3)]) == (1, 2, 3)


def test_patch_invalid_diffs():
    with pytest.raises(DiffFormatError):
        patch([1, 2], [op_remove(2, 0, 1)])
    with pytest.raises(DiffFormatError):
        patch([1, 2], [op_remove(0, 0, 2)])
    with pytest.raises(DiffFormatError):
        patch([1, 2], [op_remove(0, 0, 1), op_remove(0, 0, 1)])
    with pytest.raises(DiffFormatError):
        patch([1, 2], [op_add(0, 5, 3)])
    with pytest.raises(DiffFormatError):
        patch([1, 2], [EditEntry("replace", 0, 0, 3)])
    with pytest.raises(DiffFormatError):
        patch([1, 2], [("add", 0, 0, 3)])
    with pytest.raises(ValueError):
        patch({"a": 1}, [])
