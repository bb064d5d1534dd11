"""
seedlist core: clean-architecture layout.

- domain: Contact value type and cache limits. No outer dependencies.
- application: ContactStore use cases, list operations, storage port, errors.
- infrastructure: adapters (FileContactStorage, InMemoryContactStorage) and JSON encoding.
"""

from seedlist.application import (
    ContactListStorage,
    ContactStore,
    ContactStoreError,
    DecodeFailure,
    ReadFailure,
    WriteFailure,
)
from seedlist.domain import MAX_CONTACTS, TRANSPORT_TCP, TRANSPORT_UTP, Contact
from seedlist.infrastructure import (
    FileContactStorage,
    InMemoryContactStorage,
    default_cache_path,
    open_file_store,
    parse_contacts,
    serialise_contacts,
)

__all__ = [
    "MAX_CONTACTS",
    "TRANSPORT_TCP",
    "TRANSPORT_UTP",
    "Contact",
    "ContactListStorage",
    "ContactStore",
    "ContactStoreError",
    "DecodeFailure",
    "FileContactStorage",
    "InMemoryContactStorage",
    "ReadFailure",
    "WriteFailure",
    "default_cache_path",
    "open_file_store",
    "parse_contacts",
    "serialise_contacts",
]
