# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

""" gccounter count

"""
import sys
import os
from time import time
import logging as lg

from . import SubcommandOptions, configure_logging
from .console import Stopwatch
from ..utils.helpers import format_minutes as fmtmins
from ..core.model import GCCounter
from ..tracks import get_writer_class


class TrackOptions(SubcommandOptions):

    def __init__(self, args):
        super().__init__(args)
        if self.logfile is None:
            self.logfile = sys.stderr


class CountOptions(TrackOptions):

    OPTS = """
    - Input Options:
        - fastafile:
            positional: True
            help: Path to sequence file (FASTA or FASTQ, may be gzipped).
                  Record names are matched against the genome sizes table.
        - sizesfile:
            positional: True
            help: Genome sizes table. Tab-separated, one "chrom<TAB>length"
                  line per chromosome. Chromosome order is kept in the
                  output track.
        - id_delimiter:
            default: "|"
            help: Record names are cut at the first occurrence of this
                  string before lookup (e.g. "chr1|GRCh38" -> "chr1").
    - Binning Options:
        - bin_width:
            type: int
            default: 50
            help: Genome bin width in bases.
        - pattern:
            default: GC
            help: Two-symbol pattern to count.
        - ignore_case:
            action: store_true
            help: Also count lowercase (soft-masked) matches.
        - on_error:
            default: abort
            choices:
                - abort
                - skip
            help: What to do with a record whose name is missing from the
                  sizes table or whose matches fall outside the chromosome.
                  "abort" stops the run; "skip" logs a warning and continues.
    - Performance Options:
        - ncpu:
            default: 1
            type: int
            help: Number of threads used to scan sequence records.
    - Reporting Options:
        - quiet:
            action: store_true
            help: Silence (most) output.
        - verbose:
            action: store_true
            help: Show detailed progress and timing.
        - debug:
            action: store_true
            help: Print debug messages.
        - logfile:
            type: argparse.FileType('w')
            help: Log output to this file.
        - outdir:
            default: .
            help: Output directory.
        - exp_tag:
            default: gccounter
            help: Experiment tag
        - track_format:
            default: bigwig
            choices:
                - bigwig
                - bedgraph
            help: Output track format.
        - checkpoint:
            action: store_true
            help: Also save the binned coverage to a checkpoint file that
                  "gccounter resume" can turn into a track later.
    """


def write_track(gcc, opts, console, stopwatch):
    """Shared output stage of ``count`` and ``resume``."""
    os.makedirs(opts.outdir, exist_ok=True)
    Writer = get_writer_class(opts.track_format)
    outfile = opts.outfile_path('coverage.{}'.format(Writer.suffix))

    stopwatch.start('Write track')
    lg.info('Writing {} track...'.format(opts.track_format))
    stime = time()
    nwritten = gcc.write_track(outfile, opts.track_format)
    stopwatch.stop()
    lg.info('Wrote track in {}'.format(fmtmins(time() - stime)))

    console.status('Writing track... done ({:,} intervals)'.format(nwritten))
    console.output_file(outfile)
    return outfile


def run(args):
    """Scan sequences, bin pattern matches, and write the coverage track.

    Args:
        args: Parsed argparse namespace.
    """
    opts = CountOptions(args)
    console = configure_logging(opts)
    lg.info('\n{}\n'.format(opts))
    total_time = time()
    stopwatch = Stopwatch()

    console.banner(opts.version)
    console.section('Input')
    console.item('Sequences', os.path.basename(opts.fastafile))
    console.item('Genome sizes', os.path.basename(opts.sizesfile))
    console.item('Bin width', opts.bin_width)
    console.item('Pattern', opts.pattern)
    console.blank()

    stopwatch.start('Layout')
    gcc = GCCounter(opts)
    _ri = gcc.run_info
    console.status('Genome layout: {:,} chromosomes, {:,} bins'.format(
        _ri['chromosomes'], _ri['bins']))

    lg.info('Scanning sequences...')
    stopwatch.start('Scan')
    stime = time()
    gcc.load_sequences()
    _scan_elapsed = time() - stime
    lg.info('Scanned sequences in {}'.format(fmtmins(_scan_elapsed)))
    gcc.print_summary(lg.INFO)

    console.status('Scanning sequences... done ({:.1f}s)'.format(_scan_elapsed))
    console.detail('{:,} records, {:,} skipped, {:,} matches'.format(
        _ri['records'], _ri['skipped_records'], _ri['matches']))
    console.blank()

    if opts.checkpoint:
        _ckpt = opts.outfile_path('checkpoint.npz')
        os.makedirs(opts.outdir, exist_ok=True)
        gcc.save(_ckpt)
        console.verbose('Saved checkpoint {}'.format(_ckpt))

    console.section('Output')
    write_track(gcc, opts, console, stopwatch)
    if opts.checkpoint:
        console.output_file(opts.outfile_path('checkpoint.npz'))

    console.blank()
    console.timing_table(stopwatch)
    console.blank()
    console.status('Completed in {:.1f}s'.format(time() - total_time))
    lg.info("gccounter count complete (%s)" % fmtmins(time() - total_time))
