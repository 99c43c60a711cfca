# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .log import DiffFormatError


class DiffOp:
    "Collection of valid values for the op field in edit entries."
    # Values sort lexically so that an insertion precedes a deletion
    # at the same position.
    ADD = "add"
    REMOVE = "remove"


class EditEntry(namedtuple("EditEntry", ["op", "old_index", "new_index", "value"])):
    """A single insertion or deletion in an edit script.

    For a deletion, old_index is the position of the deleted value in the
    old sequence and new_index the position in the new sequence it aligns
    with. For an insertion, new_index is the position of the inserted
    value in the new sequence and old_index the insertion point in the
    old sequence, i.e. the value is inserted before old[old_index].

    Entries order by (position, op), where position is new_index for
    insertions and old_index for deletions.

    Equality still compares all four fields, so two distinct entries with
    the same position and op are neither less nor greater than each other
    but also not equal.
    """
    __slots__ = ()

    @property
    def position(self):
        if self.op == DiffOp.ADD:
            return self.new_index
        return self.old_index

    def sort_key(self):
        return (self.position, self.op)

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()

    def __le__(self, other):
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other):
        return self.sort_key() > other.sort_key()

    def __ge__(self, other):
        return self.sort_key() >= other.sort_key()

    def __repr__(self):
        if self.op == DiffOp.ADD:
            return "EditEntry(+ new[{}]={!r} before old[{}])".format(
                self.new_index, self.value, self.old_index)
        return "EditEntry(- old[{}]={!r})".format(self.old_index, self.value)


def op_add(old_index, new_index, value):
    "Create an edit entry inserting value as new[new_index], before old[old_index]."
    return EditEntry(DiffOp.ADD, old_index, new_index, value)

def op_remove(old_index, new_index, value):
    "Create an edit entry deleting value at old[old_index]."
    return EditEntry(DiffOp.REMOVE, old_index, new_index, value)


class SequenceDiffBuilder(object):
    """Accumulates edit entries in the order they are produced.

    The diff algorithms walk the edit graph from the top left corner,
    so append order is path order.
    """

    OPS = (
        DiffOp.ADD,
        DiffOp.REMOVE,
        )

    def __init__(self):
        self._diff = []

    def validated(self):
        return self._diff

    def append(self, entry):
        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, EditEntry)
        assert entry.op in SequenceDiffBuilder.OPS
        self._diff.append(entry)

    def extend(self, entries):
        for e in entries:
            self.append(e)

    def addrange(self, old_index, new_index, valuelist):
        "Insert all of valuelist before old[old_index], starting at new[new_index]."
        for i, value in enumerate(valuelist):
            self.append(op_add(old_index, new_index + i, value))

    def removerange(self, old_index, new_index, valuelist):
        "Delete old[old_index:old_index+len(valuelist)], which holds valuelist."
        for i, value in enumerate(valuelist):
            self.append(op_remove(old_index + i, new_index, value))


def sorted_diff(diff):
    """Return the entries of diff ordered by (position, op).

    Insertions sort before deletions at equal position.
    """
    return sorted(diff, key=EditEntry.sort_key)


def count_edits(diff):
    "Return the number of (deletions, insertions) in diff."
    removed = sum(1 for e in diff if e.op == DiffOp.REMOVE)
    return removed, len(diff) - removed


def is_valid_diff(diff):
    """Checks wheter a diff (list of edit entries) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
        result = True
    except DiffFormatError:
        result = False
    return result


def validate_diff(diff):
    """Check wheter a diff (list of edit entries) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise DiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_entry(e)


def validate_diff_entry(e):
    """Check that e is a well formed edit entry.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(e, EditEntry):
        raise DiffFormatError("Diff entry '{}' is not an edit entry.".format(e))
    if e.op not in SequenceDiffBuilder.OPS:
        raise DiffFormatError("Unknown diff op '{}'.".format(e.op))
    for name in ("old_index", "new_index"):
        index = getattr(e, name)
        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise DiffFormatError(
                "Invalid {} '{}' in diff entry, expecting a non-negative int.".format(
                    name, index))
