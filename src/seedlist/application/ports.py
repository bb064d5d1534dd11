"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from seedlist.domain import Contact


class ContactListStorage(Protocol):
    """Loads and saves the whole persisted contact list. No partial updates."""

    def load(self) -> list[Contact]:
        """Return the persisted list, or [] when nothing was persisted yet.

        Raises ReadFailure when the backing data cannot be read and
        DecodeFailure when it is not a valid contact list.
        """
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Replace the persisted list with contacts. Raises WriteFailure."""
        ...
