# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from myersdiff import patch
from myersdiff.diff_format import is_valid_diff
from myersdiff.diffing.seq_bruteforce import bruteforce_llcs


def random_sequence(rng, maxlen, alphabet="abcd"):
    return [rng.choice(alphabet) for _ in range(rng.randint(0, maxlen))]


def check_diff_and_patch(difffunc, a, b):
    "Check that difffunc(a, b) is a valid and minimal edit script from a to b."
    d = difffunc(a, b)
    assert is_valid_diff(d)
    assert patch(a, d) == b
    assert len(d) == len(a) + len(b) - 2*bruteforce_llcs(a, b)
    return d
