# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""bedGraph output: ``chrom<TAB>start<TAB>end<TAB>value`` lines."""

import logging as lg

import pandas as pd

from .abc import TrackWriter


class BedGraphWriter(TrackWriter):

    suffix = 'bedGraph'

    @property
    def name(self) -> str:
        return 'bedgraph'

    def write(self, intervals):
        nwritten = 0
        with open(self.filename, 'w') as outh:
            for chrom, block in self.iter_blocks(intervals):
                df = pd.DataFrame(list(block), columns=['chrom', 'start', 'end', 'value'])
                df.to_csv(outh, sep='\t', header=False, index=False)
                nwritten += len(df)
        lg.info('Wrote {} intervals to {}'.format(nwritten, self.filename))
        return nwritten
