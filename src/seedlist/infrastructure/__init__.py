"""Infrastructure layer: concrete implementations of application ports."""

from seedlist.infrastructure.file_storage import FileContactStorage, open_file_store
from seedlist.infrastructure.memory_storage import InMemoryContactStorage
from seedlist.infrastructure.paths import default_cache_path
from seedlist.infrastructure.serialization import parse_contacts, serialise_contacts

__all__ = [
    "FileContactStorage",
    "InMemoryContactStorage",
    "default_cache_path",
    "open_file_store",
    "parse_contacts",
    "serialise_contacts",
]
