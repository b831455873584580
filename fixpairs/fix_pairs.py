#!/usr/bin/env python3
"""
fixpairs, fix_pairs.py - Re-pair forward and reverse FASTQ files.
=================================================================

Purpose
-------

Forward and reverse reads of a run can get out of sync when reads are removed
from only one of the two files. This module matches reads by identifier (the
header up to the first space) and writes three files:

    <base>.1.fq  surviving forward reads
    <base>.2.fq  surviving reverse reads, in the same order as <base>.1.fq
    <base>.U.fq  unpaired reads, forward-only first, then reverse-only

Two strategies are available:

1. ``memory``: load the forward file into a dict, stream the reverse file once
   and write matches as they are found. Paired output follows the reverse file.
2. ``indexed``: index byte offsets of every record in both files, compute the
   paired and unpaired identifiers, then seek back into the inputs to write each
   record. Memory use is limited to identifiers and offsets. Paired output
   follows the forward file.

"""

from collections.abc import Callable
from pathlib import Path

from fixpairs.core.constants import FASTQ_ENCODING, PROGRESS_INTERVAL
from fixpairs.core.fastq_index import index_fastq_offsets, index_fastq_records, read_record, record_identifier
from fixpairs.core.logging_config import get_logger, log_elapsed
from fixpairs.core.read_fastq_records import read_fastq
from fixpairs.core.reconcile import partition_identifiers, unconsumed_identifiers
from fixpairs.core.writer import get_output_paths, write_fastq_record, write_fastq_records
from fixpairs.models.models import FixPairsConfig, PairingSummary

logger = get_logger(__name__)


def fix_pairs_in_memory(forward: Path | str, reverse: Path | str, output_base: Path | str) -> PairingSummary:
    """Re-pair reads by holding all forward records in memory.

    Args:
        forward: Path to the forward FASTQ file.
        reverse: Path to the reverse FASTQ file.
        output_base: Base name for the three output files.

    Returns:
        PairingSummary with read counts.
    """
    for_outf_name, rev_outf_name, unp_outf_name = get_output_paths(output_base)

    with log_elapsed("Reading forward reads"):
        for_recs, nforward = index_fastq_records(forward)

    paired_ids: list[str] = []
    nreverse = 0
    nbroken_reverse = 0

    with (
        Path(reverse).open(encoding=FASTQ_ENCODING) as revf,
        for_outf_name.open("w", encoding=FASTQ_ENCODING) as for_outf,
        rev_outf_name.open("w", encoding=FASTQ_ENCODING) as rev_outf,
        unp_outf_name.open("w", encoding=FASTQ_ENCODING) as unp_outf,
    ):
        with log_elapsed("Matching reverse reads"):
            for record in read_fastq(revf):
                nreverse += 1
                if nreverse % PROGRESS_INTERVAL == 0:
                    logger.debug(f"Reading {reverse} -- {nreverse}")

                identifier = record_identifier(record.header, reverse, nreverse)
                if identifier in for_recs:
                    write_fastq_record(for_outf, for_recs[identifier])
                    write_fastq_record(rev_outf, record)
                    paired_ids.append(identifier)
                else:
                    write_fastq_record(unp_outf, record)
                    nbroken_reverse += 1

        with log_elapsed("Writing forward unpaired reads"):
            for_unpaired = unconsumed_identifiers(for_recs, paired_ids)
            nbroken_forward = write_fastq_records(unp_outf, (for_recs[i] for i in for_unpaired))

    return PairingSummary(
        num_forward=nforward,
        num_reverse=nreverse,
        num_pairs=len(paired_ids),
        num_forward_unpaired=nbroken_forward,
        num_reverse_unpaired=nbroken_reverse,
    )


def fix_pairs_indexed(forward: Path | str, reverse: Path | str, output_base: Path | str) -> PairingSummary:
    """Re-pair reads using byte offset indexes of both input files.

    Args:
        forward: Path to the forward FASTQ file.
        reverse: Path to the reverse FASTQ file.
        output_base: Base name for the three output files.

    Returns:
        PairingSummary with read counts.
    """
    for_outf_name, rev_outf_name, unp_outf_name = get_output_paths(output_base)

    with log_elapsed("Indexing FASTQ files"):
        for_idx, nforward = index_fastq_offsets(forward)
        rev_idx, nreverse = index_fastq_offsets(reverse)

    with log_elapsed("Finding paired IDs"):
        partition = partition_identifiers(for_idx, rev_idx)
    logger.debug(f"Num paired keys: {len(partition.paired)}")
    logger.debug(f"Num for only keys: {len(partition.forward_only)}")
    logger.debug(f"Num rev only keys: {len(partition.reverse_only)}")

    with Path(forward).open("rb") as forf, Path(reverse).open("rb") as revf:
        with (
            log_elapsed("Writing paired reads"),
            for_outf_name.open("w", encoding=FASTQ_ENCODING) as foutf,
            rev_outf_name.open("w", encoding=FASTQ_ENCODING) as routf,
        ):
            for n, key in enumerate(partition.paired, start=1):
                if n % PROGRESS_INTERVAL == 0:
                    logger.debug(f"Writing paired reads -- {n}")
                write_fastq_record(foutf, read_record(forf, for_idx[key]))
                write_fastq_record(routf, read_record(revf, rev_idx[key]))

        with log_elapsed("Writing un-paired reads"), unp_outf_name.open("w", encoding=FASTQ_ENCODING) as uoutf:
            nbroken_forward = write_fastq_records(
                uoutf, (read_record(forf, for_idx[key]) for key in partition.forward_only)
            )
            nbroken_reverse = write_fastq_records(
                uoutf, (read_record(revf, rev_idx[key]) for key in partition.reverse_only)
            )

    return PairingSummary(
        num_forward=nforward,
        num_reverse=nreverse,
        num_pairs=len(partition.paired),
        num_forward_unpaired=nbroken_forward,
        num_reverse_unpaired=nbroken_reverse,
    )


STRATEGIES: dict[str, Callable[[Path | str, Path | str, Path | str], PairingSummary]] = {
    "memory": fix_pairs_in_memory,
    "indexed": fix_pairs_indexed,
}


def run_fix_pairs(config: FixPairsConfig) -> PairingSummary:
    """Re-pair the reads described by a FixPairsConfig with its chosen strategy.

    Args:
        config: Validated configuration.

    Returns:
        PairingSummary with read counts.
    """
    logger.info(f"Re-pairing {config.forward} and {config.reverse} ({config.strategy} strategy)")
    summary = STRATEGIES[config.strategy](config.forward, config.reverse, config.output_base)

    for_outf_name, rev_outf_name, unp_outf_name = config.output_paths
    logger.info(f"Surviving forward seqs: {for_outf_name}")
    logger.info(f"Surviving reverse seqs: {rev_outf_name}")
    logger.info(f"Unpaired seqs: {unp_outf_name}")
    return summary
