#! /usr/bin/env python
# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

""" Main functionality of gccounter

"""
import sys
import argparse

from gccounter import __version__
from .core.errors import CoverageError
from .cli import count as cli_count
from .cli import resume as cli_resume


USAGE = ''' %(prog)s <command> [<args>]

The most commonly used commands are:
   count          Bin dinucleotide matches and write a coverage track
   resume         Write a coverage track from a checkpoint file

'''


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) == 0:
        empty_parser = argparse.ArgumentParser(
            description='Binned dinucleotide coverage tracks',
            usage=USAGE,
        )
        empty_parser.print_help(sys.stderr)
        sys.exit(1)

    parser = argparse.ArgumentParser(
        description='Binned dinucleotide coverage tracks',
    )
    parser.add_argument('--version',
        action='version',
        version=__version__,
        default=__version__,
    )

    subparser = parser.add_subparsers(help='Sub-command help', dest='subcommand')

    ''' Parser for count '''
    count_parser = subparser.add_parser('count',
        description='''Bin dinucleotide matches and write a coverage track''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_count.CountOptions.add_arguments(count_parser)
    count_parser.set_defaults(func=cli_count.run)

    ''' Parser for resume '''
    resume_parser = subparser.add_parser('resume',
        description='''Write a coverage track from a checkpoint file''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_resume.ResumeOptions.add_arguments(resume_parser)
    resume_parser.set_defaults(func=cli_resume.run)

    args = parser.parse_args(argv)
    if not hasattr(args, 'func'):
        parser.print_help(sys.stderr)
        sys.exit(1)
    try:
        args.func(args)
    except CoverageError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
