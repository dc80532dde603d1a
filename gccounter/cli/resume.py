# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

""" gccounter resume

"""
import os
from time import time
import logging as lg

from . import configure_logging
from .console import Stopwatch
from .count import TrackOptions, write_track
from ..utils.helpers import format_minutes as fmtmins
from ..core.model import GCCounter


class ResumeOptions(TrackOptions):
    OPTS = """
    - Input Options:
        - checkpoint:
            positional: True
            help: Path to checkpoint file written by "gccounter count --checkpoint".
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
    """


def run(args):
    """Write a coverage track from a saved checkpoint.

    Args:
        args: Parsed argparse namespace.
    """
    opts = ResumeOptions(args)
    console = configure_logging(opts)
    lg.info('\n{}\n'.format(opts))
    total_time = time()
    stopwatch = Stopwatch()

    console.banner(opts.version)
    console.section('Input')
    console.item('Checkpoint', os.path.basename(opts.checkpoint))
    console.blank()

    lg.info('Loading checkpoint...')
    stopwatch.start('Load')
    stime = time()
    gcc = GCCounter.load(opts.checkpoint)
    gcc.opts = opts
    _load_elapsed = time() - stime
    gcc.print_summary(lg.INFO)

    _ri = gcc.run_info
    console.status('Loaded checkpoint ({:.1f}s)'.format(_load_elapsed))
    console.detail('{:,} chromosomes, {:,} bins of {} bases'.format(
        _ri['chromosomes'], _ri['bins'], _ri['bin_width']))
    console.blank()

    console.section('Output')
    write_track(gcc, opts, console, stopwatch)

    console.blank()
    console.timing_table(stopwatch)
    console.blank()
    console.status('Completed in {:.1f}s'.format(time() - total_time))
    lg.info("gccounter resume complete (%s)" % fmtmins(time() - total_time))
