#!/usr/bin/env python3
"""Logging configuration using loguru for fixpairs."""

import contextlib
import time
from collections.abc import Generator
from datetime import datetime
from pathlib import Path
from typing import Literal

from loguru import logger
from rich.logging import RichHandler

# Track file handler ID so we can avoid duplicates
_file_handler_id: int | None = None

# Default log format for files
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
) -> None:
    """Configure loguru console logging for the application.

    File logging is added separately with :func:`add_file_handler`.

    Args:
        level: Minimum log level to display.
    """
    global _file_handler_id

    # Remove default handler (and any file handler added earlier)
    logger.remove()
    _file_handler_id = None

    # At INFO, only the CLI module talks; library modules report WARNING and up
    console_filter = {"fixpairs.cli": "INFO", "": "WARNING"} if level == "INFO" else None

    logger.add(
        RichHandler(markup=False, show_time=False, show_level=True, show_path=False),
        format="{message}",
        level=level,
        filter=console_filter,
    )


def get_logger(name: str | None = None):
    """Get a logger instance.

    Args:
        name: Optional name for the logger context.

    Returns:
        Configured logger instance.
    """
    if name:
        return logger.bind(name=name)
    return logger


def get_log_path(output_dir: Path | str) -> Path:
    """Generate timestamped log file path.

    Args:
        output_dir: Directory where log file will be created.

    Returns:
        Path to the log file with format: fix_pairs_YYYYMMDD_HHMMSS.log
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(output_dir) / f"fix_pairs_{timestamp}.log"


def add_file_handler(
    log_path: Path | str,
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG",
) -> int:
    """Add a file handler to the logger.

    Only one file handler is active at a time, so repeated runs in the same
    process do not duplicate log lines.

    Args:
        log_path: Path to the log file.
        level: Minimum log level for file logging.

    Returns:
        Handler ID that can be used to remove the handler later.
    """
    global _file_handler_id

    if _file_handler_id is not None:
        with contextlib.suppress(ValueError):
            logger.remove(_file_handler_id)

    log_path = Path(log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    _file_handler_id = logger.add(
        str(log_path),
        format=LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention="7 days",
        compression="gz",
    )

    return _file_handler_id


@contextlib.contextmanager
def log_elapsed(title: str) -> Generator[None, None, None]:
    """Log how long the enclosed block took, e.g. "Indexing FASTQ files finished in 1.23 seconds"."""
    start = time.perf_counter()
    yield
    logger.info(f"{title} finished in {time.perf_counter() - start:.2f} seconds")
