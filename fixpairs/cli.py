#!/usr/bin/env python3
"""Command line interface for fixpairs using Typer."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fixpairs.core.constants import ASCII_ART, DEFAULT_STRATEGY
from fixpairs.core.logging_config import add_file_handler, get_log_path, get_logger, setup_logging
from fixpairs.models.models import FixPairsConfig, PairingSummary
from fixpairs.version import __version__

app = typer.Typer(
    name="fix-pairs",
    help="Re-pair forward and reverse FASTQ files whose reads have fallen out of sync.",
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger("cli")


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold green]fix-pairs[/bold green] version {__version__}")
        raise typer.Exit()


def print_summary(summary: PairingSummary) -> None:
    """Print read counts of a finished run."""
    table = Table(title="Results", show_header=False)
    table.add_column("", style="cyan")
    table.add_column("", justify="right")
    table.add_row("Num input forward reads", str(summary.num_forward))
    table.add_row("Num input reverse reads", str(summary.num_reverse))
    table.add_row("Total input reads", str(summary.total_input))
    table.add_section()
    table.add_row("Num surviving read pairs", str(summary.num_pairs))
    table.add_row("Num broken forward reads", str(summary.num_forward_unpaired))
    table.add_row("Num broken reverse reads", str(summary.num_reverse_unpaired))
    table.add_row("Total reads accounted for", str(summary.total_accounted))
    console.print(table)


@app.command(no_args_is_help=True)
def main(
    forward: Annotated[Path, typer.Argument(help="Forward reads, e.g. reads.1.fq.")],
    reverse: Annotated[Path, typer.Argument(help="Reverse reads, e.g. reads.2.fq.")],
    output_base: Annotated[
        Path, typer.Argument(help="Base name for output files: <base>.1.fq, <base>.2.fq and <base>.U.fq.")
    ],
    strategy: Annotated[
        str,
        typer.Option(
            "-m",
            "--strategy",
            help="'indexed' keeps only byte offsets in memory; 'memory' loads all forward reads (faster, more RAM).",
        ),
    ] = DEFAULT_STRATEGY,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Enable verbose output (DEBUG level)."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Re-pair FORWARD and REVERSE reads and write paired and unpaired reads.

    Paired reads must have headers that match up until the first space, like these:

        @SN741:746:HKFKLBCXX:1:1106:19267:2152 1:N:0:TGCGTAAC
        @SN741:746:HKFKLBCXX:1:1106:19267:2152 2:N:0:TGCGTAAC

    Illumina forward/reverse tags are not checked.
    """
    from fixpairs.fix_pairs import run_fix_pairs

    log_level = "DEBUG" if verbose else "INFO"
    setup_logging(level=log_level)  # type: ignore

    try:
        config = FixPairsConfig(forward=forward, reverse=reverse, output_base=output_base, strategy=strategy)  # type: ignore
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    # Set up file logging
    log_path = get_log_path(config.output_base.parent)
    add_file_handler(log_path)
    logger.info(f"Logging to {log_path}")

    console.print(Text(ASCII_ART, style="bold green"))
    console.print(f"  Version: {__version__}")
    console.print(f"  Forward: {forward}")
    console.print(f"  Reverse: {reverse}")
    console.print(f"  Output base: {output_base}")
    console.print(f"  Strategy: {config.strategy}")
    console.print()

    try:
        summary = run_fix_pairs(config)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    print_summary(summary)
    logger.info("Finished re-pairing reads")


def main_cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main_cli()
