# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Dinucleotide scanning of raw sequence bytes."""

import numpy as np


def _as_bytes(seq):
    if isinstance(seq, str):
        return seq.encode('ascii')
    return bytes(seq)


def find_dinucleotide(seq, pattern=b'GC', ignore_case=False):
    """Find every occurrence of a two-symbol pattern in a sequence.

    Matches may overlap, so ``GCGC`` matches ``GC`` at 0 and 2 and ``CCC``
    matches ``CC`` at 0 and 1.

    Args:
        seq: Sequence as ``str`` or bytes-like object.
        pattern: Two-symbol pattern, ``str`` or ``bytes``.
        ignore_case: Also match lowercase (soft-masked) symbols.

    Returns:
        numpy.ndarray of 0-based start positions (int64), ascending.
    """
    pattern = _as_bytes(pattern)
    if len(pattern) != 2:
        raise ValueError(f'pattern must be exactly two symbols, got {pattern!r}')

    seq = _as_bytes(seq)
    if ignore_case:
        seq = seq.upper()
        pattern = pattern.upper()
    if len(seq) < 2:
        return np.empty(0, dtype=np.int64)

    arr = np.frombuffer(seq, dtype=np.uint8)
    hits = (arr[:-1] == pattern[0]) & (arr[1:] == pattern[1])
    return np.flatnonzero(hits).astype(np.int64)
