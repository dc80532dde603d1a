# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""gccounter pipeline: genome layout, sequence scanning and track output."""

import functools
import logging as lg
from collections import Counter, OrderedDict
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from ..genome import iter_records, read_genome_sizes
from ..tracks import get_writer_class
from ..utils.helpers import str2int
from .coverage import CoverageAccumulator
from .emitter import IntervalEmitter
from .errors import OutOfRangePosition, UnknownChromosome
from .scan import find_dinucleotide


def scan_record(record, pattern='GC', ignore_case=False):
    """Scan one ``(record_id, sequence)`` pair.

    Returns:
        tuple of (record_id, sequence length, match positions)
    """
    rid, seq = record
    return rid, len(seq), find_dinucleotide(seq, pattern, ignore_case)


def _print_progress(nrecs, infolev=1000):
    msg = f'...processed {nrecs} records'
    if nrecs % infolev == 0:
        lg.info(msg)
    else:
        lg.debug(msg)


class GCCounter:
    """Builds a binned dinucleotide coverage track from sequence records."""

    def __init__(self, opts):
        self.opts = opts  # Command line options
        self.run_info = OrderedDict()  # Information about the run

        # Set the version
        self.run_info['version'] = self.opts.version

        # Construction errors (sizes table, bin width) abort here
        _sizes = read_genome_sizes(self.opts.sizesfile)
        self.accumulator = CoverageAccumulator(_sizes, self.opts.bin_width)
        self._layout_info()

    def _layout_info(self):
        _layout = self.accumulator.layout
        self.run_info['chromosomes'] = len(_layout)
        self.run_info['genome_length'] = sum(c.length for c in _layout)
        self.run_info['bin_width'] = _layout.bin_width
        self.run_info['bins'] = _layout.total_bins

    def save(self, filename):
        self.accumulator.save(
            filename,
            _run_info=np.array([(k, str(v)) for k, v in self.run_info.items()], dtype=str),
        )

    @classmethod
    def load(cls, filename):
        obj = cls.__new__(cls)
        obj.accumulator = CoverageAccumulator.load(filename)
        obj.run_info = OrderedDict()
        with np.load(filename) as loader:
            if '_run_info' in loader.files:
                for k, v in loader['_run_info']:
                    obj.run_info[str(k)] = str2int(str(v))
        obj._layout_info()
        return obj

    def load_sequences(self):
        """Scan every input record and accumulate matches into bins.

        Records are scanned on ``ncpu`` threads when ``ncpu > 1``. Results are
        consumed in input order and only this thread writes to the coverage
        array.

        Raises:
            UnknownChromosome: a record id is missing from the sizes table
                and ``on_error`` is ``abort``.
            OutOfRangePosition: a match lies past the chromosome length and
                ``on_error`` is ``abort``.
        """
        _pattern = getattr(self.opts, 'pattern', 'GC')
        _icase = getattr(self.opts, 'ignore_case', False)
        _delim = getattr(self.opts, 'id_delimiter', '|')
        _ncpu = max(1, getattr(self.opts, 'ncpu', 1))

        _scan = functools.partial(scan_record, pattern=_pattern, ignore_case=_icase)
        records = iter_records(self.opts.fastafile, _delim)

        seqinfo = Counter()
        if _ncpu > 1:
            lg.info('Scanning records on {} threads'.format(_ncpu))
            with ThreadPoolExecutor(max_workers=_ncpu) as pool:
                self._accumulate(pool.map(_scan, records), seqinfo)
        else:
            self._accumulate(map(_scan, records), seqinfo)

        for f in ['records', 'skipped_records', 'matches']:
            self.run_info[f] = seqinfo[f]

    def _accumulate(self, scanned, seqinfo):
        _on_error = getattr(self.opts, 'on_error', 'abort')
        for rid, seqlen, positions in scanned:
            seqinfo['records'] += 1
            try:
                n = self.accumulator.add_many(rid, positions)
            except (UnknownChromosome, OutOfRangePosition) as exc:
                if _on_error == 'abort':
                    lg.error('Record "{}": {}'.format(rid, exc))
                    raise
                lg.warning('Skipping record "{}": {}'.format(rid, exc))
                seqinfo['skipped_records'] += 1
                continue
            if seqlen != self.accumulator.layout[rid].length:
                lg.debug('Record "{}" has {} bases, sizes table says {}'.format(
                    rid, seqlen, self.accumulator.layout[rid].length))
            seqinfo['matches'] += n
            _print_progress(seqinfo['records'])

    def write_track(self, filename, track_format='bigwig'):
        """Emit merged intervals and hand them to the track writer.

        Returns:
            Number of intervals written.
        """
        Writer = get_writer_class(track_format)
        writer = Writer(filename, self.accumulator.layout.chrom_sizes())
        emitter = IntervalEmitter(self.accumulator)
        nwritten = writer.write(emitter.records())
        self.run_info['intervals'] = nwritten
        return nwritten

    def print_summary(self, loglev=lg.WARNING):
        _d = Counter()
        for k, v in self.run_info.items():
            try:  # noqa: SIM105
                _d[k] = int(v)
            except ValueError:
                pass

        lg.log(loglev, 'Coverage Summary:')
        lg.log(loglev, '    {} chromosomes, {} bases.'.format(_d['chromosomes'], _d['genome_length']))
        lg.log(loglev, '    {} bins of {} bases.'.format(_d['bins'], _d['bin_width']))
        lg.log(loglev, '--')
        lg.log(loglev, '    {} sequence records; of these'.format(_d['records']))
        lg.log(loglev, '        {} were skipped.'.format(_d['skipped_records']))
        lg.log(loglev, '    {} pattern matches binned.'.format(_d['matches']))
        lg.log(loglev, '\n')

    def __str__(self):
        if hasattr(self, 'opts') and hasattr(self.opts, 'fastafile'):
            return f'<GCCounter fastafile={self.opts.fastafile}, sizesfile={self.opts.sizesfile}>'
        return '<GCCounter>'
