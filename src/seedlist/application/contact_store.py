"""Bootstrap contact cache: merge, prune, read back. The storage is the source of truth."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

from seedlist.application.contact_list import merge_contacts, oldest_contacts
from seedlist.application.errors import DecodeFailure
from seedlist.application.ports import ContactListStorage
from seedlist.domain import MAX_CONTACTS, Contact

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = timedelta(hours=4)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContactStore:
    """Ordered, capacity-bounded, duplicate-free list of bootstrap contacts.

    Every call re-reads the storage; nothing is cached between calls. Not safe
    for concurrent writers: the last save wins.
    """

    def __init__(
        self,
        storage: ContactListStorage,
        *,
        encode: Callable[[list[Contact]], bytes],
        capacity: int = MAX_CONTACTS,
        refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1.")
        self._storage = storage
        self._encode = encode
        self._capacity = capacity
        self._refresh_interval = refresh_interval
        self._clock = clock
        self._last_refreshed = clock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def update(self, add: Sequence[Contact], prune: Sequence[Contact]) -> None:
        """Prune then merge new contacts into the cache and persist it.

        Raises ReadFailure or WriteFailure on I/O errors. A corrupt cache is
        replaced rather than reported.
        """
        self.merge_and_persist(add, prune)
        if self.refresh_due():
            logger.info(
                "Bootstrap contacts not refreshed since %s; refresh due",
                self._last_refreshed.isoformat(),
            )

    def merge_and_persist(
        self, add: Sequence[Contact], prune: Sequence[Contact]
    ) -> None:
        try:
            existing = self._storage.load()
        except DecodeFailure as e:
            logger.warning("Discarding unreadable bootstrap cache: %s", e)
            existing = []

        contacts = merge_contacts(existing, add, prune, capacity=self._capacity)
        logger.debug(
            "Merged bootstrap contacts: %d stored, %d offered, %d pruned -> %d",
            len(existing),
            len(add),
            len(prune),
            len(contacts),
        )
        self._storage.save(contacts)

    def read_all(self) -> list[Contact]:
        """Return the persisted list, freshest first. Raises DecodeFailure if corrupt."""
        return self._storage.load()

    def oldest(self, n: int) -> list[Contact]:
        """Return up to n of the oldest contacts, the single oldest first."""
        return oldest_contacts(self.read_all(), n)

    def serialised_contacts(self) -> bytes:
        """Return the persisted list encoded for handing to another peer."""
        return self._encode(self.read_all())

    def refresh_due(self, now: datetime | None = None) -> bool:
        """True when no refresh was recorded within the refresh interval."""
        now = now or self._clock()
        return now > self._last_refreshed + self._refresh_interval

    def record_refresh(self, now: datetime | None = None) -> None:
        """Mark a maintenance pass over the cache as done."""
        self._last_refreshed = now or self._clock()
