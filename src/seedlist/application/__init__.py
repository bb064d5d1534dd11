"""Application layer: the contact store, list operations, ports and errors. Depends only on domain."""

from seedlist.application.contact_list import (
    merge_contacts,
    oldest_contacts,
    prune_contacts,
    unique_contacts,
)
from seedlist.application.contact_store import ContactStore
from seedlist.application.errors import (
    ContactStoreError,
    DecodeFailure,
    ReadFailure,
    WriteFailure,
)
from seedlist.application.ports import ContactListStorage

__all__ = [
    "ContactListStorage",
    "ContactStore",
    "ContactStoreError",
    "DecodeFailure",
    "ReadFailure",
    "WriteFailure",
    "merge_contacts",
    "oldest_contacts",
    "prune_contacts",
    "unique_contacts",
]
