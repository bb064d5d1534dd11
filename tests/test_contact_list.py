"""Unit tests for the pure contact list operations."""

import pytest

from seedlist.application import (
    merge_contacts,
    oldest_contacts,
    prune_contacts,
    unique_contacts,
)
from seedlist.domain import Contact


def _c(i: int) -> Contact:
    return Contact("tcp", f"10.0.0.{i}", 5000 + i)


A, B, C, D, E = (_c(i) for i in range(1, 6))


def test_unique_keeps_first_occurrence():
    assert unique_contacts([A, B, A, C, B]) == [A, B, C]
    assert unique_contacts([]) == []


def test_prune_keeps_order_of_rest():
    assert prune_contacts([A, B, C, D], [C, A]) == [B, D]
    assert prune_contacts([A, B], [E]) == [A, B]
    assert prune_contacts([A, B], []) == [A, B]


def test_merge_into_empty_takes_add_verbatim_then_dedups():
    assert merge_contacts([], [A, A, B]) == [A, B]
    assert merge_contacts([], [C, A, B]) == [C, A, B]


def test_merge_prepends_new_block_in_original_order():
    assert merge_contacts([C, D], [A, B]) == [A, B, C, D]


def test_merge_skips_already_present():
    assert merge_contacts([A, B], [B, C]) == [C, A, B]
    assert merge_contacts([A, B], [A, B]) == [A, B]


def test_merge_stops_at_capacity_without_evicting():
    assert merge_contacts([A, B], [C, D, E], capacity=3) == [C, A, B]
    assert merge_contacts([A, B, C], [D], capacity=3) == [A, B, C]


def test_merge_prune_makes_room():
    assert merge_contacts([A, B, C], [D], [C], capacity=3) == [D, A, B]
    assert merge_contacts([A, B, C], [D], [A], capacity=3) == [D, B, C]


def test_merge_readding_pruned_contact_puts_it_in_front():
    assert merge_contacts([A, B, C], [C], [C]) == [C, A, B]


def test_merge_into_empty_respects_capacity():
    assert merge_contacts([], [A, B, C, D], capacity=2) == [A, B]


def test_merge_truncates_oversized_existing_list():
    assert merge_contacts([A, B, C, D], [E], capacity=3) == [A, B, C]


def test_merge_everything_pruned_takes_add_verbatim():
    assert merge_contacts([A, B], [C, C, D], [A, B]) == [C, D]


def test_merge_rejects_bad_capacity():
    with pytest.raises(ValueError, match="capacity"):
        merge_contacts([], [A], capacity=0)


def test_oldest():
    assert oldest_contacts([A, B, C], 2) == [C, B]
    assert oldest_contacts([A, B, C], 3) == [C, B, A]
    assert oldest_contacts([A, B, C], 10) == [C, B, A]
    assert oldest_contacts([A, B, C], 0) == []
    assert oldest_contacts([], 5) == []
    with pytest.raises(ValueError):
        oldest_contacts([A], -1)
