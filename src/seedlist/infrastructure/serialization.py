"""JSON encoding of contact lists for the cache file and for peers."""

from pydantic import TypeAdapter, ValidationError

from seedlist.domain import Contact

_CONTACT_LIST = TypeAdapter(list[Contact])


def serialise_contacts(contacts: list[Contact]) -> bytes:
    """Encode contacts as a pretty-printed UTF-8 JSON array, order and duplicates kept."""
    return _CONTACT_LIST.dump_json(list(contacts), indent=2)


def parse_contacts(buffer: bytes) -> list[Contact] | None:
    """Decode a contact list, or None if buffer is not valid UTF-8 JSON of contacts.

    Every record needs transport, host and port; no defaults or type coercion.
    """
    try:
        text = bytes(buffer).decode("utf-8")
    except UnicodeDecodeError:
        return None
    try:
        return _CONTACT_LIST.validate_json(text, strict=True)
    except (ValidationError, ValueError):
        return None
