# This file is part of gccounter.
# Licensed under MIT License.

"""Readers for the genome sizes table and sequence records."""

from .fasta import iter_records, record_id  # noqa: F401
from .sizes import read_genome_sizes  # noqa: F401
