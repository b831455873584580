#!/usr/bin/env python3
"""Utility functions shared by the CLI and the configuration models."""

from pathlib import Path


def check_output_directory(outdir: str) -> str:
    """Check if outdir exists, otherwise create it.

    Args:
        outdir: Path to the output directory.

    Returns:
        The output directory path as a string.
    """
    outdir_path = Path(outdir)
    if outdir_path.is_dir():
        return outdir
    else:
        outdir_path.mkdir(parents=True, exist_ok=True)
        return outdir


def is_same_file(first: Path, second: Path) -> bool:
    """Check whether two paths point at the same existing file."""
    try:
        return first.samefile(second)
    except FileNotFoundError:
        return False
