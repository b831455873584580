#!/usr/bin/env python3
"""Split read identifiers into paired and unpaired sets.

Insertion-ordered dicts stand in for sets throughout, so every output follows
file scan order and repeated runs write identical files.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from fixpairs.core.constants import Identifier


@dataclass
class PairPartition:
    """Identifiers split by which input files they occur in."""

    paired: list[Identifier] = field(default_factory=list)
    forward_only: list[Identifier] = field(default_factory=list)
    reverse_only: list[Identifier] = field(default_factory=list)


def partition_identifiers(forward_ids: Iterable[Identifier], reverse_ids: Iterable[Identifier]) -> PairPartition:
    """Compute the intersection and both differences of two identifier collections.

    Args:
        forward_ids: Identifiers of the forward file (e.g. an index dict).
        reverse_ids: Identifiers of the reverse file.

    Returns:
        PairPartition. ``paired`` and ``forward_only`` follow the order of
        ``forward_ids``; ``reverse_only`` follows the order of ``reverse_ids``.
    """
    forward_keys = dict.fromkeys(forward_ids)
    reverse_keys = dict.fromkeys(reverse_ids)

    partition = PairPartition()
    for identifier in forward_keys:
        if identifier in reverse_keys:
            partition.paired.append(identifier)
        else:
            partition.forward_only.append(identifier)
    partition.reverse_only = [identifier for identifier in reverse_keys if identifier not in forward_keys]
    return partition


def unconsumed_identifiers(forward_ids: Iterable[Identifier], consumed: Iterable[Identifier]) -> list[Identifier]:
    """Forward identifiers that were never matched, in forward order."""
    consumed_set = set(consumed)
    return [identifier for identifier in forward_ids if identifier not in consumed_set]
