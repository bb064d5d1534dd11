"""Pure operations on an ordered contact list (index 0 freshest, last oldest)."""

from collections.abc import Iterable, Sequence

from seedlist.domain import MAX_CONTACTS, Contact


def unique_contacts(contacts: Iterable[Contact]) -> list[Contact]:
    """Drop repeated contacts, keeping the first occurrence of each."""
    return list(dict.fromkeys(contacts))


def prune_contacts(
    contacts: Sequence[Contact], prune: Iterable[Contact]
) -> list[Contact]:
    """Return contacts without any element of prune. Order of the rest is kept."""
    removed = set(prune)
    if not removed:
        return list(contacts)
    return [contact for contact in contacts if contact not in removed]


def merge_contacts(
    existing: Sequence[Contact],
    add: Sequence[Contact],
    prune: Iterable[Contact] = (),
    *,
    capacity: int = MAX_CONTACTS,
) -> list[Contact]:
    """Prune existing, then put the new contacts from add in front of it.

    Candidates already present (after pruning) are skipped. An empty list takes
    all candidates as given; a non-empty one only takes as many as fit in the
    remaining capacity, in their original order. Leftover candidates are
    dropped, nothing already stored is evicted to make room. The result is
    deduplicated and never longer than capacity.
    """
    if capacity < 1:
        raise ValueError("capacity must be at least 1.")
    contacts = prune_contacts(existing, prune)
    present = set(contacts)
    candidates = [contact for contact in add if contact not in present]

    if not contacts:
        merged = candidates
    else:
        room = max(capacity - len(contacts), 0)
        merged = candidates[:room] + contacts

    return unique_contacts(merged)[:capacity]


def oldest_contacts(contacts: Sequence[Contact], n: int) -> list[Contact]:
    """Return up to n contacts from the end of the list, oldest first."""
    if n < 0:
        raise ValueError("n must be non-negative.")
    return list(reversed(contacts))[:n]
