# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Arrays of furthest reaching x coordinates, indexed by diagonal k.
"""

__all__ = ["DiagonalArray", "alloc_V_array"]


# Set to true to check every read of a diagonal array against earlier writes
DEBUGGING = 0


class DiagonalArray(object):
    """Fixed size array indexed by diagonal k in [-size, size].

    Stored as a flat list, mapping V[k] to the list index V0 + k.
    Slots start out uninitialized (None), reading one of them
    means the search algorithm is broken.
    """
    __slots__ = ("size", "V0", "_a")

    def __init__(self, size):
        if size < 0:
            raise ValueError("Diagonal array size must be non-negative, got %d." % size)
        self.size = size
        self.V0 = size
        self._a = [None]*(2*size + 1)

    def __len__(self):
        return len(self._a)

    def _index(self, k):
        if not -self.size <= k <= self.size:
            raise IndexError("Diagonal %d outside of range [%d, %d]." % (k, -self.size, self.size))
        return self.V0 + k

    def __getitem__(self, k):
        return self._a[self._index(k)]

    def __setitem__(self, k, x):
        self._a[self._index(k)] = x


class DebuggingArray(DiagonalArray):
    "Debugging tool to capture array accesses."
    __slots__ = ("name", "_w")

    def __init__(self, size, name):
        super(DebuggingArray, self).__init__(size)
        print("Alloc %s[%d:%d]" % (name, -size, size))
        self.name = name
        self._w = [0]*len(self._a)

    def __getitem__(self, k):
        i = self._index(k)
        if not self._w[i]:
            raise RuntimeError("Trying to read unwritten location %s[%d]!" % (self.name, k))
        print("    %d <- %s[%d]" % (self._a[i], self.name, k))
        return self._a[i]

    def __setitem__(self, k, x):
        i = self._index(k)
        if self._w[i]:
            print("    %s[%d] <- %d (was: %d)" % (self.name, k, x, self._a[i]))
        else:
            print("    %s[%d] <- %d (first access)" % (self.name, k, x))
        self._w[i] = 1
        self._a[i] = x


def alloc_V_array(N, M, name):
    # Big enough for N+M edits, plus one diagonal of slack on either
    # side for the seed, so that also N+M < 2 is covered.
    size = N + M + 1
    if DEBUGGING:
        return DebuggingArray(size, name)
    return DiagonalArray(size)
