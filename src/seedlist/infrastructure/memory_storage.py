"""In-memory implementation of ContactListStorage (no file).

Keeps the encoded bytes rather than the list so it behaves like the file:
callers never share list objects with it, and corrupt content can be injected.
"""

from seedlist.application import DecodeFailure
from seedlist.domain import Contact
from seedlist.infrastructure.serialization import parse_contacts, serialise_contacts


class InMemoryContactStorage:
    """Stores the encoded contact list in memory. Nothing survives the process."""

    def __init__(self, initial: list[Contact] | None = None) -> None:
        self._data: bytes | None = None
        self.saves = 0
        if initial is not None:
            self._data = serialise_contacts(initial)

    def load(self) -> list[Contact]:
        if self._data is None:
            return []
        contacts = parse_contacts(self._data)
        if contacts is None:
            raise DecodeFailure("Failed to decode in-memory bootstrap cache")
        return contacts

    def save(self, contacts: list[Contact]) -> None:
        self._data = serialise_contacts(contacts)
        self.saves += 1

    def write_raw(self, data: bytes) -> None:
        """Replace the stored bytes as-is (e.g. to simulate a torn write)."""
        self._data = data

    def read_raw(self) -> bytes | None:
        return self._data
