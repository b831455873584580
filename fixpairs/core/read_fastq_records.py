#!/usr/bin/env python3

from collections.abc import Generator
from typing import TextIO

from fixpairs.core.logging_config import get_logger
from fixpairs.core.records import FastqRecord

logger = get_logger(__name__)


def read_fastq(infile: TextIO) -> Generator[FastqRecord, None, None]:
    """Read one fastq record at a time using a generator.

    A truncated record at the end of the file (line count not a multiple of
    four) is dropped with a warning.

    Args:
        infile: Open file handle for reading FASTQ records.

    Yields:
        FastqRecord for each complete record.
    """
    for line in infile:
        name = line.rstrip("\r\n")
        seq = infile.readline()
        infile.readline()  # skip + line
        qual = infile.readline()
        if not qual:
            logger.warning(f"Ignoring incomplete record at end of {getattr(infile, 'name', 'input')}: {name!r}")
            return
        yield FastqRecord(name, seq.rstrip("\r\n"), qual.rstrip("\r\n"))
