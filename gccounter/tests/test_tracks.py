# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Tests for gccounter.tracks writers."""

import os

import pyBigWig
import pytest

from gccounter.core.coverage import CoverageAccumulator
from gccounter.core.emitter import IntervalEmitter
from gccounter.core.errors import GenomeSizesError, UnknownChromosome
from gccounter.tracks import get_writer_class
from gccounter.tracks.abc import TrackWriter
from gccounter.tracks.bedgraph import BedGraphWriter
from gccounter.tracks.bigwig import BigWigWriter


@pytest.fixture
def acc():
    acc = CoverageAccumulator([('chr1', 45), ('chr2', 20)], 10)
    acc.add_many('chr1', [0, 1, 12, 41])
    acc.add('chr2', 19, 0.5)
    return acc


class TestGetWriterClass:
    def test_known(self):
        assert get_writer_class('bigwig') is BigWigWriter
        assert get_writer_class('bedgraph') is BedGraphWriter

    def test_unknown(self):
        with pytest.raises(NotImplementedError):
            get_writer_class('wig')

    def test_abstract(self):
        with pytest.raises(TypeError):
            TrackWriter('x', {})

    def test_length_must_fit_32_bits(self, tmp_path):
        with pytest.raises(GenomeSizesError):
            BedGraphWriter(str(tmp_path / 'x.bedGraph'), {'chr1': 2**32})


class TestBedGraphWriter:
    def test_write(self, acc, tmp_path):
        fn = str(tmp_path / 'out.bedGraph')
        writer = BedGraphWriter(fn, acc.layout.chrom_sizes())
        assert writer.write(IntervalEmitter(acc).records()) == 6
        with open(fn) as fh:
            lines = [line.rstrip('\n').split('\t') for line in fh]
        assert lines == [
            ['chr1', '0', '10', '2.0'],
            ['chr1', '10', '20', '1.0'],
            ['chr1', '20', '40', '0.0'],
            ['chr1', '40', '45', '1.0'],
            ['chr2', '0', '10', '0.0'],
            ['chr2', '10', '20', '0.5'],
        ]

    def test_unknown_chromosome(self, tmp_path):
        writer = BedGraphWriter(str(tmp_path / 'x.bedGraph'), {'chr1': 10})
        with pytest.raises(UnknownChromosome):
            writer.write([('chr1', 0, 10, 1.0), ('chrX', 0, 10, 1.0)])

    def test_empty(self, tmp_path):
        fn = str(tmp_path / 'x.bedGraph')
        assert BedGraphWriter(fn, {}).write([]) == 0
        assert os.path.getsize(fn) == 0


class TestBigWigWriter:
    def test_write(self, acc, tmp_path):
        fn = str(tmp_path / 'out.bw')
        writer = BigWigWriter(fn, acc.layout.chrom_sizes())
        assert writer.write(IntervalEmitter(acc).records()) == 6

        with pyBigWig.open(fn) as bw:
            assert bw.chroms() == {'chr1': 45, 'chr2': 20}
            assert bw.intervals('chr1') == (
                (0, 10, 2.0), (10, 20, 1.0), (20, 40, 0.0), (40, 45, 1.0),
            )
            assert bw.intervals('chr2') == ((0, 10, 0.0), (10, 20, 0.5))

    def test_batches(self, tmp_path, monkeypatch):
        monkeypatch.setattr(BigWigWriter, 'batch_size', 2)
        acc = CoverageAccumulator([('chr1', 50)], 10)
        acc.coverage[:] = [1, 2, 3, 4, 5]
        fn = str(tmp_path / 'out.bw')
        assert BigWigWriter(fn, acc.layout.chrom_sizes()).write(IntervalEmitter(acc).records()) == 5
        with pyBigWig.open(fn) as bw:
            assert [iv[2] for iv in bw.intervals('chr1')] == [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_empty_genome_writes_nothing(self, tmp_path):
        fn = str(tmp_path / 'out.bw')
        assert BigWigWriter(fn, {}).write([]) == 0
        assert not os.path.exists(fn)
