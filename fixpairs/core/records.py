#!/usr/bin/env python3
"""FASTQ record type and read identifier extraction."""

from dataclasses import dataclass

from fixpairs.core.constants import FASTQ_MARKER, SEPARATOR_LINE, Identifier


@dataclass(frozen=True)
class FastqRecord:
    """A single FASTQ record.

    The header keeps its leading ``@``. The separator line is not stored; it is
    always written back as a bare ``+``.
    """

    header: str
    sequence: str
    quality: str

    def to_fastq(self) -> str:
        """Render the record as a newline-terminated four-line block."""
        return "\n".join([self.header, self.sequence, SEPARATOR_LINE, self.quality]) + "\n"


def get_identifier(header: str, strip_marker: bool = False) -> Identifier:
    """Get the pairing key of a read from its header line.

    Paired reads share their header up to the first space::

        @SN741:746:HKFKLBCXX:1:1106:19267:2152 1:N:0:TGCGTAAC
        @SN741:746:HKFKLBCXX:1:1106:19267:2152 2:N:0:TGCGTAAC

    Args:
        header: Header line, starting with ``@``.
        strip_marker: Drop the leading ``@`` from the returned identifier.

    Returns:
        The header up to (excluding) the first space.

    Raises:
        ValueError: If the header does not start with ``@`` or the identifier is empty.
    """
    if not header.startswith(FASTQ_MARKER):
        raise ValueError(f"FASTQ header does not start with '{FASTQ_MARKER}': {header!r}")
    identifier = header.split(" ", 1)[0]
    if identifier == FASTQ_MARKER:
        raise ValueError(f"FASTQ header has an empty read identifier: {header!r}")
    if strip_marker:
        return identifier[len(FASTQ_MARKER) :]
    return identifier
