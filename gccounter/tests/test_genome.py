# -*- coding: utf-8 -*-

# This file is part of gccounter.
# Licensed under MIT License.

"""Tests for gccounter.genome: sizes table and sequence records."""

import gzip

import pytest

from gccounter.core.errors import GenomeSizesError
from gccounter.genome import iter_records, read_genome_sizes, record_id


def write(path, text):
    path.write_text(text)
    return str(path)


# --- Genome sizes ---


class TestReadGenomeSizes:
    def test_reads_in_order(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', 'chr2\t200\nchr1\t100\nchrM\t16569\n')
        assert read_genome_sizes(fn) == [('chr2', 200), ('chr1', 100), ('chrM', 16569)]

    def test_skips_comments_and_blank_lines(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', '# genome\nchr1\t100\n\nchr2\t50\n')
        assert read_genome_sizes(fn) == [('chr1', 100), ('chr2', 50)]

    def test_empty_file(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', '')
        assert read_genome_sizes(fn) == []

    def test_wrong_column_count(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', 'chr1\t100\tx\nchr2\t50\tx\n')
        with pytest.raises(GenomeSizesError, match='expected 2 columns'):
            read_genome_sizes(fn)

    def test_bad_length(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', 'chr1\t100\nchr2\tabc\n')
        with pytest.raises(GenomeSizesError, match='row 2'):
            read_genome_sizes(fn)

    def test_negative_length(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', 'chr1\t-5\n')
        with pytest.raises(GenomeSizesError):
            read_genome_sizes(fn)

    def test_is_value_error(self, tmp_path):
        fn = write(tmp_path / 'g.sizes', 'chr1\tabc\n')
        with pytest.raises(ValueError):
            read_genome_sizes(fn)


# --- Sequence records ---


class TestRecords:
    def test_record_id(self):
        assert record_id('chr1|GRCh38|x') == 'chr1'
        assert record_id('chr1') == 'chr1'
        assert record_id('chr1|x', delimiter='') == 'chr1|x'
        assert record_id('chr1:x', delimiter=':') == 'chr1'

    def test_fasta(self, tmp_path):
        fn = write(tmp_path / 'seqs.fa', '>chr1|hg38 description\nACGT\nGC\n>chr2\nNNNN\n')
        assert list(iter_records(fn)) == [('chr1', b'ACGTGC'), ('chr2', b'NNNN')]

    def test_gzipped_fasta(self, tmp_path):
        fn = str(tmp_path / 'seqs.fa.gz')
        with gzip.open(fn, 'wt') as fh:
            fh.write('>chrM\nGCGC\n')
        assert list(iter_records(fn)) == [('chrM', b'GCGC')]

    def test_is_lazy(self, tmp_path):
        fn = write(tmp_path / 'seqs.fa', '>a\nAC\n>b\nGT\n')
        it = iter_records(fn)
        assert next(it) == ('a', b'AC')
        assert next(it) == ('b', b'GT')
        with pytest.raises(StopIteration):
            next(it)
