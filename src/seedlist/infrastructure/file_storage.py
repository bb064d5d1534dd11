"""File-backed implementation of ContactListStorage.

The whole list is rewritten on every save and synced to disk before returning.
There is no journal: a crash mid-write leaves a corrupt file, which loads as a
DecodeFailure.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from seedlist.application import ContactStore, DecodeFailure, ReadFailure, WriteFailure
from seedlist.domain import Contact
from seedlist.infrastructure.serialization import parse_contacts, serialise_contacts

logger = logging.getLogger(__name__)


class FileContactStorage:
    """Stores the contact list as JSON in a single file."""

    def __init__(
        self,
        path: str | os.PathLike,
        *,
        encode: Callable[[list[Contact]], bytes] = serialise_contacts,
        decode: Callable[[bytes], list[Contact] | None] = parse_contacts,
    ) -> None:
        self._path = Path(path)
        self._encode = encode
        self._decode = decode

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Contact]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise ReadFailure(f"Failed to read bootstrap cache {self._path}: {e}") from e
        contacts = self._decode(raw)
        if contacts is None:
            raise DecodeFailure(f"Failed to decode bootstrap cache {self._path}")
        return contacts

    def save(self, contacts: list[Contact]) -> None:
        payload = self._encode(contacts)
        try:
            with self._path.open("wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise WriteFailure(f"Failed to write bootstrap cache {self._path}: {e}") from e
        logger.debug("Wrote %d bootstrap contacts to %s", len(contacts), self._path)


def open_file_store(path: str | os.PathLike, **kwargs) -> ContactStore:
    """Return a ContactStore backed by the JSON file at path. kwargs go to ContactStore."""
    return ContactStore(FileContactStorage(path), encode=serialise_contacts, **kwargs)
