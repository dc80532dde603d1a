# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Run-length walk over a finished coverage array.

:class:`IntervalEmitter` turns the flat per-bin array of a
:class:`~gccounter.core.coverage.CoverageAccumulator` into merged,
chromosome-bounded intervals. It is lazy and forward-only: each ``next()``
produces one run and leaves the cursor on the first bin of the following run.
Create a new emitter to scan the array again.
"""

from collections import namedtuple

Interval = namedtuple('Interval', ['chrom', 'start', 'end', 'value'])
Interval.__doc__ = """Half-open ``[start, end)`` run in chromosome coordinates."""


class IntervalEmitter:
    """Iterator of :class:`Interval` over a coverage accumulator.

    Constructing an emitter freezes the accumulator; the coverage array is
    read-only from then on.

    Example::

        acc = CoverageAccumulator([('chr1', 45)], 10)
        acc.add('chr1', 42, 2.0)
        list(IntervalEmitter(acc))
        # [Interval('chr1', 0, 40, 0.0), Interval('chr1', 40, 45, 2.0)]
    """

    def __init__(self, accumulator):
        accumulator.freeze()
        self.accumulator = accumulator
        self._values = accumulator.coverage
        self._layout = accumulator.layout
        self._bin_width = accumulator.bin_width
        self.current_bin = 0
        self.current_chrom = self._layout.locate(0)

    def __iter__(self):
        return self

    def __next__(self):
        if self.current_chrom is None:
            raise StopIteration

        chrom, size, offset = self.current_chrom
        bin_width = self._bin_width
        values = self._values

        rel_bin = self.current_bin - offset
        start = rel_bin * bin_width
        val = values[self.current_bin]

        # Walk to the end of the run without leaving the chromosome
        skipped = False
        while values[self.current_bin] == val:
            self.current_bin += 1
            rel_bin += 1
            skipped = True
            if rel_bin * bin_width >= size:
                break
        if skipped:
            # The cursor sits one past the last equal bin
            self.current_bin -= 1

        rel_bin = self.current_bin - offset
        ret = Interval(chrom, start, min(rel_bin * bin_width + bin_width, size), float(val))

        self.current_bin += 1
        if (self.current_bin - offset) * bin_width >= size:
            self.current_chrom = self._layout.locate(self.current_bin)
        return ret

    @property
    def exhausted(self):
        return self.current_chrom is None

    def records(self):
        """Yield plain ``(chrom, start, end, value)`` tuples."""
        for iv in self:
            yield tuple(iv)
