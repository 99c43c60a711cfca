# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import DiffOp, DiffFormatError, validate_diff
from .utils import is_indexable_sequence


__all__ = ["patch"]


def patch_list(obj, diff):
    """Apply an edit script to a list of values.

    Deletions are applied from the back, so that the old indices of the
    remaining deletions stay valid. What is left is the common subsequence,
    into which the insertions are applied in order of their new index.
    """
    newobj = list(obj)

    removed = set()
    added = []
    for e in diff:
        if e.op == DiffOp.REMOVE:
            index = e.old_index
            if index >= len(obj):
                raise DiffFormatError(
                    "Cannot delete item {} of sequence of length {}.".format(index, len(obj)))
            if index in removed:
                raise DiffFormatError("Multiple deletions of item {}.".format(index))
            value = obj[index]
            if not (value is e.value or value == e.value):
                raise DiffFormatError(
                    "Deleted value {!r} does not match item {} = {!r}.".format(
                        e.value, index, value))
            removed.add(index)
        elif e.op == DiffOp.ADD:
            added.append(e)
        else:
            raise DiffFormatError("Invalid op {}.".format(e.op))

    for index in sorted(removed, reverse=True):
        del newobj[index]

    for e in sorted(added, key=lambda e: e.new_index):
        if e.new_index > len(newobj):
            raise DiffFormatError(
                "Cannot insert item {} into sequence of length {}.".format(
                    e.new_index, len(newobj)))
        newobj.insert(e.new_index, e.value)

    return newobj


def patch_string(obj, diff):
    "Patch a string, assuming diff is character based."
    return "".join(patch_list(obj, diff))


def patch(obj, diff):
    """Produce a patched version of obj with given edit script.

    A valid input object is any indexable sequence, of which str and
    tuple are patched into a new str or tuple, anything else into a list.
    """
    validate_diff(diff)
    if isinstance(obj, str):
        return patch_string(obj, diff)
    elif isinstance(obj, tuple):
        return tuple(patch_list(obj, diff))
    elif is_indexable_sequence(obj):
        return patch_list(obj, diff)
    else:
        raise ValueError("Invalid object type to patch: {}".format(type(obj).__name__))
