"""Domain layer: entities and value objects. No dependencies on outer layers."""

from seedlist.domain.entities import MAX_CONTACTS, TRANSPORT_TCP, TRANSPORT_UTP, Contact

__all__ = ["MAX_CONTACTS", "TRANSPORT_TCP", "TRANSPORT_UTP", "Contact"]
