#!/usr/bin/env python3
"""Constants and type aliases used throughout the fixpairs package."""

from typing import TypeAlias

# =============================================================================
# Type Aliases
# =============================================================================
Identifier: TypeAlias = str

OffsetTriple: TypeAlias = tuple[int, int, int]
"""Byte offsets of the header, sequence and quality lines of one record."""

# =============================================================================
# FASTQ Format
# =============================================================================
FASTQ_MARKER = "@"
"""First character of every FASTQ header line."""

SEPARATOR_LINE = "+"
"""Separator line written between sequence and quality."""

FASTQ_ENCODING = "iso-8859-1"
"""Encoding used for FASTQ text. Maps every byte, so offsets and text agree."""

LINES_PER_RECORD = 4

# =============================================================================
# Progress Reporting
# =============================================================================
PROGRESS_INTERVAL = 10_000
"""Number of records between progress log messages."""

# =============================================================================
# Output Files
# =============================================================================
PAIRED_FORWARD_SUFFIX = ".1.fq"
"""Suffix for surviving forward reads."""

PAIRED_REVERSE_SUFFIX = ".2.fq"
"""Suffix for surviving reverse reads."""

UNPAIRED_SUFFIX = ".U.fq"
"""Suffix for unpaired reads from both inputs."""

# =============================================================================
# Strategies
# =============================================================================
DEFAULT_STRATEGY = "indexed"

ASCII_ART = r"""
 ___ _        ___      _
| __(_)_ __  | _ \__ _(_)_ _ ___
| _|| \ \ /  |  _/ _` | | '_(_-<
|_| |_/_\_\  |_| \__,_|_|_| /__/
"""
"""ASCII art for the CLI banner."""
