#!/usr/bin/env python3
"""Write FASTQ records to the paired and unpaired output files."""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from fixpairs.core.constants import PAIRED_FORWARD_SUFFIX, PAIRED_REVERSE_SUFFIX, UNPAIRED_SUFFIX
from fixpairs.core.records import FastqRecord


def get_output_paths(output_base: Path | str) -> tuple[Path, Path, Path]:
    """Get the output file names for a base name.

    Args:
        output_base: Base name, e.g. ``results/sample``.

    Returns:
        Tuple of (paired forward, paired reverse, unpaired) paths, e.g.
        ``results/sample.1.fq``, ``results/sample.2.fq``, ``results/sample.U.fq``.
    """
    base = str(output_base)
    return (
        Path(base + PAIRED_FORWARD_SUFFIX),
        Path(base + PAIRED_REVERSE_SUFFIX),
        Path(base + UNPAIRED_SUFFIX),
    )


def write_fastq_record(handle: TextIO, record: FastqRecord) -> None:
    """Write one record as a four-line block."""
    handle.write(record.to_fastq())


def write_fastq_records(handle: TextIO, records: Iterable[FastqRecord]) -> int:
    """Write records to an open handle and return how many were written."""
    n = 0
    for record in records:
        write_fastq_record(handle, record)
        n += 1
    return n
