"""Errors raised by the contact store and its storage adapters."""


class ContactStoreError(Exception):
    """Base class for bootstrap cache failures. Callers may treat any of them as "no bootstrap data"."""


class ReadFailure(ContactStoreError):
    """The cache exists but could not be read."""


class WriteFailure(ContactStoreError):
    """The cache could not be created, written or flushed to disk."""


class DecodeFailure(ContactStoreError):
    """The cache was read but does not hold a valid contact list."""
