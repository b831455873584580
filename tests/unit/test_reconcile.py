"""Unit tests for fixpairs.core.reconcile module."""

from fixpairs.core.reconcile import PairPartition, partition_identifiers, unconsumed_identifiers


class TestPartitionIdentifiers:
    """Tests for partition_identifiers function."""

    def test_overlapping_sets(self):
        partition = partition_identifiers(["A", "B", "C"], ["B", "C", "D"])
        assert partition == PairPartition(paired=["B", "C"], forward_only=["A"], reverse_only=["D"])

    def test_order_follows_scan_order(self):
        """Paired follows forward order even when reverse order differs."""
        partition = partition_identifiers(["E", "A", "C", "B"], ["B", "Z", "C", "E", "Y"])
        assert partition.paired == ["E", "C", "B"]
        assert partition.forward_only == ["A"]
        assert partition.reverse_only == ["Z", "Y"]

    def test_accepts_index_dicts(self):
        forward_index = {"A": (0, 1, 2), "B": (3, 4, 5)}
        reverse_index = {"B": (0, 1, 2)}
        partition = partition_identifiers(forward_index, reverse_index)
        assert partition.paired == ["B"]
        assert partition.forward_only == ["A"]
        assert partition.reverse_only == []

    def test_empty_reverse(self):
        partition = partition_identifiers(["A", "B"], [])
        assert partition.paired == []
        assert partition.forward_only == ["A", "B"]
        assert partition.reverse_only == []

    def test_partition_is_exclusive_and_complete(self):
        forward = ["A", "B", "C", "D"]
        reverse = ["C", "D", "E"]
        partition = partition_identifiers(forward, reverse)
        groups = [set(partition.paired), set(partition.forward_only), set(partition.reverse_only)]
        assert set.union(*groups) == set(forward) | set(reverse)
        assert sum(len(g) for g in groups) == len(set(forward) | set(reverse))
        assert all(i in forward and i in reverse for i in partition.paired)

    def test_duplicates_collapsed(self):
        partition = partition_identifiers(["A", "A", "B"], ["A", "A"])
        assert partition.paired == ["A"]
        assert partition.forward_only == ["B"]


class TestUnconsumedIdentifiers:
    """Tests for unconsumed_identifiers function."""

    def test_forward_order_kept(self):
        forward_index = {"C": 1, "A": 2, "B": 3, "D": 4}
        assert unconsumed_identifiers(forward_index, ["B", "C"]) == ["A", "D"]

    def test_repeated_consumption(self):
        assert unconsumed_identifiers(["A", "B"], ["A", "A"]) == ["B"]

    def test_nothing_consumed(self):
        assert unconsumed_identifiers(["A", "B"], []) == ["A", "B"]
