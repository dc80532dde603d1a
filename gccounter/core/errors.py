# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Error kinds raised while building and filling a coverage array.

Construction errors (bin width, sizes table) abort a run before any sequence
is read. Ingestion errors are raised to the caller of ``add`` so it can decide
whether to skip the offending record or give up.
"""


class CoverageError(Exception):
    """Base class for all gccounter coverage errors."""


class InvalidBinWidth(CoverageError, ValueError):
    def __init__(self, bin_width):
        self.bin_width = bin_width
        super().__init__(f'bin width must be a positive integer, got {bin_width!r}')


class UnknownChromosome(CoverageError, KeyError):
    def __init__(self, chrom):
        self.chrom = chrom
        super().__init__(chrom)

    def __str__(self):
        return f'chromosome "{self.chrom}" not found in genome layout'


class OutOfRangePosition(CoverageError, IndexError):
    def __init__(self, chrom, position, length):
        self.chrom = chrom
        self.position = position
        self.length = length
        super().__init__(
            f'position {position} is outside chromosome "{chrom}" (length {length})'
        )


class DuplicateChromosome(CoverageError, ValueError):
    def __init__(self, chrom):
        self.chrom = chrom
        super().__init__(f'chromosome "{chrom}" listed more than once')


class GenomeSizesError(CoverageError, ValueError):
    """Malformed genome sizes table or chromosome length."""
