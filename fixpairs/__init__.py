"""Re-pair desynchronized forward and reverse FASTQ files."""

from fixpairs.version import __version__

__all__ = ["__version__"]
