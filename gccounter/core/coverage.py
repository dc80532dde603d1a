# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Genome binning model: chromosome layout and the flat coverage array.

All chromosomes share one dense array. Chromosome ``i`` owns the bins
``[bin_offset[i], bin_offset[i] + ceil(length[i] / bin_width))``, so a
(chromosome, position) pair maps to ``bin_offset + position // bin_width``.
"""

import logging as lg
import operator
from collections import OrderedDict, namedtuple

import numpy as np

from .errors import (
    CoverageError,
    DuplicateChromosome,
    GenomeSizesError,
    InvalidBinWidth,
    OutOfRangePosition,
    UnknownChromosome,
)

Chromosome = namedtuple('Chromosome', ['name', 'length', 'bin_offset'])


def _check_bin_width(bin_width):
    if isinstance(bin_width, bool) or not isinstance(bin_width, (int, np.integer)):
        raise InvalidBinWidth(bin_width)
    if bin_width <= 0:
        raise InvalidBinWidth(bin_width)
    return int(bin_width)


def bins_for_length(length, bin_width):
    """Number of bins needed to cover ``length`` bases (ceiling division)."""
    return -(-length // bin_width)


class GenomeLayout:
    """Ordered chromosome table with precomputed bin offsets.

    Args:
        chromosome_sizes: Iterable of ``(name, length)`` pairs, in the order
            the chromosomes are laid out in the coverage array.
        bin_width: Width of each bin in bases. Must be a positive integer.

    Raises:
        InvalidBinWidth: ``bin_width`` is zero, negative or not an integer.
        DuplicateChromosome: a name occurs more than once.
        GenomeSizesError: a length is negative or not an integer.
    """

    def __init__(self, chromosome_sizes, bin_width):
        self.bin_width = _check_bin_width(bin_width)
        self._chroms = []
        self._index = {}

        offset = 0
        for name, length in chromosome_sizes:
            name = str(name)
            try:
                length = operator.index(length)
            except TypeError:
                raise GenomeSizesError(
                    f'length of chromosome "{name}" is not an integer: {length!r}'
                ) from None
            if length < 0:
                raise GenomeSizesError(f'length of chromosome "{name}" is negative: {length}')
            if name in self._index:
                raise DuplicateChromosome(name)
            self._index[name] = len(self._chroms)
            self._chroms.append(Chromosome(name, length, offset))
            offset += bins_for_length(length, self.bin_width)

        self.total_bins = offset

    def __len__(self):
        return len(self._chroms)

    def __iter__(self):
        return iter(self._chroms)

    def __contains__(self, name):
        return name in self._index

    def __getitem__(self, name):
        try:
            return self._chroms[self._index[name]]
        except KeyError:
            raise UnknownChromosome(name) from None

    def n_bins(self, name):
        return bins_for_length(self[name].length, self.bin_width)

    def chrom_sizes(self):
        """Ordered ``{name: length}`` mapping, as track writers expect it."""
        return OrderedDict((c.name, c.length) for c in self._chroms)

    def locate(self, global_bin):
        """Return the chromosome whose bin range contains ``global_bin``.

        This is a linear scan over the chromosome table. It is only called on
        chromosome transitions, never per bin. Zero-length chromosomes own no
        bins and are never returned.

        Returns:
            Chromosome record, or None when ``global_bin`` lies past the last
            chromosome.
        """
        for chrom in self._chroms:
            if global_bin >= chrom.bin_offset and \
                    (global_bin - chrom.bin_offset) * self.bin_width < chrom.length:
                return chrom
        return None

    def __repr__(self):
        return '<GenomeLayout chromosomes={} bin_width={} bins={}>'.format(
            len(self._chroms), self.bin_width, self.total_bins)


class CoverageAccumulator:
    """Dense per-bin coverage over a whole genome.

    The accumulator is filled with :meth:`add` / :meth:`add_many` and then
    handed to an :class:`~gccounter.core.emitter.IntervalEmitter`, which
    freezes it. Once frozen the array is read-only.
    """

    def __init__(self, chromosome_sizes, bin_width):
        self.layout = GenomeLayout(chromosome_sizes, bin_width)
        self.coverage = np.zeros(self.layout.total_bins, dtype=np.float64)
        self._frozen = False
        if len(self.layout) == 0:
            lg.warning('Genome layout has no chromosomes; the track will be empty.')
        lg.debug(repr(self.layout))

    @property
    def bin_width(self):
        return self.layout.bin_width

    @property
    def frozen(self):
        return self._frozen

    def _check_writable(self):
        if self._frozen:
            raise CoverageError('coverage array is read-only once emission has started')

    def add(self, chrom, position, delta=1.0):
        """Add ``delta`` to the bin containing ``position`` on ``chrom``.

        Raises:
            UnknownChromosome: ``chrom`` is not in the layout.
            OutOfRangePosition: ``position`` is negative or not below the
                chromosome length.
        """
        self._check_writable()
        _chrom = self.layout[chrom]
        position = operator.index(position)
        if position < 0 or position >= _chrom.length:
            raise OutOfRangePosition(chrom, position, _chrom.length)
        self.coverage[_chrom.bin_offset + position // self.bin_width] += delta

    def add_many(self, chrom, positions, delta=1.0):
        """Vectorised :meth:`add` for an array of positions on one chromosome.

        Every position is validated before anything is written, so a single
        bad position leaves the array untouched.

        Args:
            chrom: Chromosome name.
            positions: Integer array-like of 0-based positions.
            delta: Scalar, or array broadcastable to ``positions``.

        Returns:
            Number of positions added.
        """
        self._check_writable()
        _chrom = self.layout[chrom]
        positions = np.asarray(positions)
        if positions.size == 0:
            return 0
        if positions.dtype.kind not in 'iu':
            raise TypeError(f'positions must be integers, got dtype {positions.dtype}')

        bad = (positions < 0) | (positions >= _chrom.length)
        if bad.any():
            raise OutOfRangePosition(chrom, int(positions[bad][0]), _chrom.length)

        bins = _chrom.bin_offset + positions.astype(np.int64) // self.bin_width
        np.add.at(self.coverage, bins, delta)
        return int(positions.size)

    def chromosome_values(self, chrom):
        """Read-only view of the bins belonging to ``chrom``."""
        _chrom = self.layout[chrom]
        view = self.coverage[_chrom.bin_offset:_chrom.bin_offset + self.layout.n_bins(chrom)]
        view.flags.writeable = False
        return view

    def total(self):
        return float(self.coverage.sum())

    def freeze(self):
        """End the accumulation phase. Safe to call more than once."""
        if not self._frozen:
            self._frozen = True
            self.coverage.flags.writeable = False
            lg.debug('Coverage array frozen ({} bins)'.format(self.coverage.size))

    def save(self, filename, **extra):
        """Checkpoint layout and coverage to a ``.npz`` archive.

        Extra keyword arrays are stored alongside (e.g. run statistics).
        """
        _chroms = list(self.layout)
        np.savez(
            filename,
            _names=np.array([c.name for c in _chroms], dtype=str),
            _lengths=np.array([c.length for c in _chroms], dtype=np.int64),
            _bin_width=self.bin_width,
            _coverage=self.coverage,
            **extra,
        )

    @classmethod
    def load(cls, filename):
        with np.load(filename) as loader:
            sizes = [(str(n), int(l)) for n, l in zip(loader['_names'], loader['_lengths'])]
            obj = cls(sizes, int(loader['_bin_width']))
            _coverage = loader['_coverage']
            if _coverage.shape != obj.coverage.shape:
                raise CoverageError(
                    f'checkpoint {filename} holds {_coverage.size} bins, layout expects {obj.coverage.size}'
                )
            obj.coverage[:] = _coverage
        return obj

    def __repr__(self):
        return '<CoverageAccumulator bins={} bin_width={} frozen={}>'.format(
            self.coverage.size, self.bin_width, self._frozen)
