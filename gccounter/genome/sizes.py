# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Genome sizes table (``chrom<TAB>length``, one chromosome per line)."""

import logging as lg

import pandas as pd

from ..core.errors import GenomeSizesError


def read_genome_sizes(filename):
    """Read a chromosome sizes table.

    Lines starting with ``#`` and blank lines are skipped. Chromosome order is
    preserved; it decides the layout of the coverage array and the order of
    chromosomes in the output track.

    Args:
        filename: Path or open text handle.

    Returns:
        list of ``(name, length)`` tuples.

    Raises:
        GenomeSizesError: wrong column count, non-integer or negative length.
    """
    try:
        df = pd.read_csv(
            filename,
            sep='\t',
            header=None,
            comment='#',
            dtype=str,
            skip_blank_lines=True,
            keep_default_na=False,
        )
    except pd.errors.EmptyDataError:
        lg.warning('Genome sizes table {} is empty'.format(filename))
        return []
    except pd.errors.ParserError as exc:
        raise GenomeSizesError(f'Invalid format in {filename}: {exc}') from exc

    if df.shape[1] != 2:
        raise GenomeSizesError(
            f'Invalid format in {filename}: expected 2 columns, found {df.shape[1]}'
        )

    result = []
    for rownum, (name, length) in enumerate(df.itertuples(index=False, name=None), start=1):
        try:
            _len = int(length)
        except ValueError:
            raise GenomeSizesError(
                f'Failed to parse length on row {rownum} of {filename}: {length!r}'
            ) from None
        if _len < 0:
            raise GenomeSizesError(f'Negative length on row {rownum} of {filename}: {_len}')
        result.append((name, _len))

    lg.info('Read {} chromosome sizes from {}'.format(len(result), filename))
    return result
