# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Sequence record input (FASTA/FASTQ, optionally gzipped) via pysam."""

import logging as lg

import pysam


def record_id(name, delimiter='|'):
    """Chromosome id of a record: its name up to the first ``delimiter``."""
    if delimiter:
        return name.split(delimiter, 1)[0]
    return name


def iter_records(filename, delimiter='|'):
    """Lazily yield ``(record_id, sequence)`` pairs.

    Args:
        filename: FASTA or FASTQ path; gzip compression is detected by pysam.
        delimiter: Record names are truncated at the first occurrence of this
            string (e.g. ``chr1|GRCh38`` -> ``chr1``). Empty to keep the name.

    Yields:
        tuple of (str, bytes)
    """
    nrec = 0
    with pysam.FastxFile(filename) as fh:
        for entry in fh:
            nrec += 1
            seq = entry.sequence or ''
            yield record_id(entry.name, delimiter), seq.encode('ascii')
    lg.debug('Read {} sequence records from {}'.format(nrec, filename))
