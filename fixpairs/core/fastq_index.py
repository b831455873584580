#!/usr/bin/env python3
"""
fixpairs, fastq_index.py - Index FASTQ files by read identifier.
================================================================

Two kinds of index are built here, each in a single forward pass over a file:

1. A content index (identifier -> FastqRecord) that keeps every record in memory.
2. An offset index (identifier -> byte offsets of the header, sequence and
   quality lines) that keeps only positions. Records are rebuilt on demand with
   :func:`read_record` by seeking in the original file.

Input files must not change between indexing and reading records back.
"""

from pathlib import Path
from typing import BinaryIO

from fixpairs.core.constants import (
    FASTQ_ENCODING,
    LINES_PER_RECORD,
    PROGRESS_INTERVAL,
    Identifier,
    OffsetTriple,
)
from fixpairs.core.logging_config import get_logger
from fixpairs.core.read_fastq_records import read_fastq
from fixpairs.core.records import FastqRecord, get_identifier

logger = get_logger(__name__)


def record_identifier(header: str, path: Path | str, record_number: int, strip_marker: bool = False) -> Identifier:
    """Get the identifier of a header, naming the file and record if it is malformed."""
    try:
        return get_identifier(header, strip_marker=strip_marker)
    except ValueError as e:
        raise ValueError(f"{path}: record {record_number}: {e}") from e


def index_fastq_records(path: Path | str) -> tuple[dict[Identifier, FastqRecord], int]:
    """Load every record of a FASTQ file into a dict keyed by identifier.

    Identifiers keep their leading ``@``. If an identifier occurs more than
    once, the last record wins.

    Args:
        path: Path to the FASTQ file.

    Returns:
        Tuple of (index, number of records read).
    """
    index: dict[Identifier, FastqRecord] = {}
    nseqs = 0
    with Path(path).open(encoding=FASTQ_ENCODING) as f:
        for record in read_fastq(f):
            nseqs += 1
            if nseqs % PROGRESS_INTERVAL == 0:
                logger.debug(f"Reading {path} -- {nseqs}")
            index[record_identifier(record.header, path, nseqs)] = record

    logger.debug(f"Num seqs in {path}: {len(index)} ({nseqs} records read)")
    return index, nseqs


def index_fastq_offsets(path: Path | str) -> tuple[dict[Identifier, OffsetTriple], int]:
    """Index the line offsets of every record in a FASTQ file.

    The file is read as raw lines in cycles of four (header, sequence,
    separator, quality). The stream position after a line is the start of the
    next one, so the position after the header is the sequence offset, the
    position after the separator is the quality offset and the position after
    the quality line is the header offset of the following record.

    A record is committed only once its quality line has been read, so a
    truncated record at the end of the file never enters the index. If an
    identifier occurs more than once, the last offsets win.

    Args:
        path: Path to the FASTQ file.

    Returns:
        Tuple of (index, number of records read). Identifiers have the
        leading ``@`` removed.
    """
    index: dict[Identifier, OffsetTriple] = {}
    nseqs = 0
    header = ""
    header_offset = seq_offset = qual_offset = 0
    lineno = 0

    with Path(path).open("rb") as f:
        for line in iter(f.readline, b""):
            if lineno == 0:  # header
                header = line.decode(FASTQ_ENCODING).rstrip("\r\n")
                seq_offset = f.tell()
            elif lineno == 2:  # separator
                qual_offset = f.tell()
            elif lineno == 3:  # quality
                nseqs += 1
                if nseqs % PROGRESS_INTERVAL == 0:
                    logger.debug(f"Indexing {path} -- {nseqs}")
                identifier = record_identifier(header, path, nseqs, strip_marker=True)
                index[identifier] = (header_offset, seq_offset, qual_offset)
                header_offset = f.tell()
            lineno = (lineno + 1) % LINES_PER_RECORD

    if lineno != 0:
        logger.warning(f"Ignoring incomplete record at end of {path}: {header!r}")

    logger.debug(f"Num seqs in {path}: {len(index)} ({nseqs} records read)")
    return index, nseqs


def read_record(handle: BinaryIO, offsets: OffsetTriple) -> FastqRecord:
    """Rebuild a record by seeking to its header, sequence and quality lines.

    Args:
        handle: File opened in binary mode. It is left open and may be reused.
        offsets: (header_offset, sequence_offset, quality_offset) from
            :func:`index_fastq_offsets`.

    Returns:
        The record, with the separator normalised to ``+``.
    """
    lines = []
    for offset in offsets:
        handle.seek(offset)
        lines.append(handle.readline().decode(FASTQ_ENCODING).rstrip("\r\n"))
    header, seq, qual = lines
    return FastqRecord(header, seq, qual)
