# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""bigWig output through pyBigWig."""

import logging as lg

import pyBigWig

from .abc import TrackWriter


class BigWigWriter(TrackWriter):
    """Write intervals into a bigWig file.

    Entries are handed to pyBigWig in batches of at most ``batch_size``
    intervals, one chromosome at a time.
    """

    suffix = 'bw'
    batch_size = 100000

    @property
    def name(self) -> str:
        return 'bigwig'

    def _flush(self, bw, chrom, starts, ends, values):
        if starts:
            bw.addEntries([chrom] * len(starts), starts, ends=ends, values=values)

    def write(self, intervals):
        if not self.chrom_sizes:
            lg.warning('No chromosomes in genome layout, bigWig {} not written'.format(self.filename))
            return 0

        nwritten = 0
        with pyBigWig.open(self.filename, 'w') as bw:
            bw.addHeader(list(self.chrom_sizes.items()))
            for chrom, block in self.iter_blocks(intervals):
                starts, ends, values = [], [], []
                for _chrom, start, end, value in block:
                    starts.append(int(start))
                    ends.append(int(end))
                    values.append(float(value))
                    if len(starts) >= self.batch_size:
                        self._flush(bw, chrom, starts, ends, values)
                        nwritten += len(starts)
                        starts, ends, values = [], [], []
                self._flush(bw, chrom, starts, ends, values)
                nwritten += len(starts)
                lg.debug('bigWig: wrote {}'.format(chrom))
        lg.info('Wrote {} intervals to {}'.format(nwritten, self.filename))
        return nwritten
