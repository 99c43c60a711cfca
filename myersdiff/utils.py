# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
from collections.abc import Mapping, Set
import io
import locale
import os
import sys


if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def is_indexable_sequence(obj):
    """Return True if obj has a length and integer indexing over [0, len).

    Mappings and sets have a length but no positional indexing,
    so they are not sequences for the purposes of diffing.
    """
    if isinstance(obj, (Mapping, Set)):
        return False
    return hasattr(obj, '__len__') and hasattr(obj, '__getitem__')


def read_lines(f, on_null='empty'):
    """Read and return the lines of a text file, keeping line endings.

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.

        on_null: What to return when the filename is the
            null filename. Only 'empty' is supported.
    """
    if isinstance(f, str) and f == EXPLICIT_MISSING_FILE:
        if on_null == 'empty':
            return []
        raise ValueError(
            'Not valid value for `on_null`: %r. Valid values '
            'are "empty"' % (on_null,))
    if isinstance(f, str):
        with io.open(f, encoding='utf8', newline='') as fh:
            return as_text_lines(fh.read())
    return as_text_lines(f.read())


def as_text_lines(text):
    if isinstance(text, bytes):
        text = text.decode("utf8")
    if isinstance(text, str):
        text = text.splitlines(True)
    if isinstance(text, tuple):
        text = list(text)
    assert isinstance(text, list), 'text argument should be string or string sequence'
    assert all(isinstance(t, str) for t in text), (
        'text argument should be string or string sequence')
    return text


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
