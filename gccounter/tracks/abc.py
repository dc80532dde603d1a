# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Base class for coverage track writers."""

import itertools
from abc import ABC, abstractmethod
from collections import OrderedDict

from ..core.errors import GenomeSizesError, UnknownChromosome

# bigWig and friends store chromosome lengths as unsigned 32-bit integers
MAX_CHROM_LENGTH = 2**32 - 1


class TrackWriter(ABC):
    """Consumes a stream of intervals and persists it as a track file.

    Args:
        filename: Output path.
        chrom_sizes: Ordered ``{name: length}`` mapping. Intervals must arrive
            grouped by chromosome in this order.
    """

    def __init__(self, filename, chrom_sizes):
        self.filename = filename
        self.chrom_sizes = OrderedDict(chrom_sizes)
        for name, length in self.chrom_sizes.items():
            if not 0 <= length <= MAX_CHROM_LENGTH:
                raise GenomeSizesError(
                    f'length of chromosome "{name}" does not fit in 32 bits: {length}'
                )

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format identifier used on the command line."""

    # File extension of the output track
    suffix = None

    def iter_blocks(self, intervals):
        """Group ``(chrom, start, end, value)`` records by chromosome."""
        for chrom, block in itertools.groupby(intervals, key=lambda iv: iv[0]):
            if chrom not in self.chrom_sizes:
                raise UnknownChromosome(chrom)
            yield chrom, block

    @abstractmethod
    def write(self, intervals) -> int:
        """Write every interval; return the number written."""
