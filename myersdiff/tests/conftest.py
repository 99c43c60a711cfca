# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import random

from pytest import fixture, skip

import myersdiff.diffing.sequences


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def rng(request):
    "Seeded random generator, rerun with the same --seed to reproduce a failure."
    return random.Random(request.config.getoption("--seed", default=1234))


@fixture(params=["myers", "bruteforce"])
def algorithm(request):
    alg = myersdiff.diffing.sequences.diff_sequence_algorithm
    myersdiff.diffing.sequences.diff_sequence_algorithm = request.param
    yield request.param
    myersdiff.diffing.sequences.diff_sequence_algorithm = alg


@fixture
def textfiles(tmpdir):
    """Fixture writing a pair of small text files into a temporary directory"""
    base = tmpdir.join('base.txt')
    remote = tmpdir.join('remote.txt')
    with io.open(str(base), 'w', encoding='utf8', newline='') as f:
        f.write("one\ntwo\nthree\nfour\n")
    with io.open(str(remote), 'w', encoding='utf8', newline='') as f:
        f.write("one\n2\nthree\nfour\nfive\n")
    return str(base), str(remote)
