# This file is part of gccounter.
# Licensed under MIT License.

"""Binning model and interval emitter."""

from .coverage import Chromosome, CoverageAccumulator, GenomeLayout  # noqa: F401
from .emitter import Interval, IntervalEmitter  # noqa: F401
from .errors import (  # noqa: F401
    CoverageError,
    DuplicateChromosome,
    GenomeSizesError,
    InvalidBinWidth,
    OutOfRangePosition,
    UnknownChromosome,
)
