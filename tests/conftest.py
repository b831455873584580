"""Shared pytest fixtures for fixpairs tests."""

import shutil
import tempfile
from pathlib import Path

import pytest


def make_fastq(records):
    """Render (header, sequence, quality) tuples as FASTQ text."""
    return "".join(f"{header}\n{seq}\n+\n{qual}\n" for header, seq, qual in records)


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for test outputs."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir)


@pytest.fixture
def write_fastq(temp_output_dir):
    """Write records to a FASTQ file in the temporary directory.

    ``trailing`` is appended verbatim, e.g. to add a truncated record.
    """

    def _write(name, records, trailing=""):
        path = temp_output_dir / name
        path.write_text(make_fastq(records) + trailing)
        return path

    return _write


@pytest.fixture
def forward_records():
    """Forward reads A, B and C."""
    return [
        ("@SN741:746:HKFKLBCXX:1:1106:1000:2152 1:N:0:TGCGTAAC", "ACGTACGTAC", "IIIIIIIIII"),
        ("@SN741:746:HKFKLBCXX:1:1106:2000:2152 1:N:0:TGCGTAAC", "GGGGCCCCAA", "FFFFFFFFFF"),
        ("@SN741:746:HKFKLBCXX:1:1106:3000:2152 1:N:0:TGCGTAAC", "TTTTAAAACC", "##########"),
    ]


@pytest.fixture
def reverse_records():
    """Reverse reads B, C and D."""
    return [
        ("@SN741:746:HKFKLBCXX:1:1106:2000:2152 2:N:0:TGCGTAAC", "TTGGGGCCCC", "EEEEEEEEEE"),
        ("@SN741:746:HKFKLBCXX:1:1106:3000:2152 2:N:0:TGCGTAAC", "GGTTTTAAAA", "DDDDDDDDDD"),
        ("@SN741:746:HKFKLBCXX:1:1106:4000:2152 2:N:0:TGCGTAAC", "CCCCCCCCCC", "AAAAAAAAAA"),
    ]


@pytest.fixture
def forward_fastq(write_fastq, forward_records):
    return write_fastq("reads.1.fq", forward_records)


@pytest.fixture
def reverse_fastq(write_fastq, reverse_records):
    return write_fastq("reads.2.fq", reverse_records)
