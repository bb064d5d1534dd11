"""Domain entities: Contact and the bootstrap cache limits."""

from dataclasses import dataclass

# Transport names for extensibility (quic, ws, etc. later).
TRANSPORT_TCP = "tcp"
TRANSPORT_UTP = "utp"
TRANSPORTS = (TRANSPORT_TCP, TRANSPORT_UTP)

# Max number of contacts kept in a bootstrap cache.
MAX_CONTACTS = 1500
PORT_MAX = 65535


@dataclass(frozen=True)
class Contact:
    """
    Represents one reachable network endpoint (transport + host + port).
    Equality is structural: two contacts with the same values are the same contact.
    """

    transport: str
    host: str
    port: int

    def __post_init__(self):
        transport = (self.transport or "").strip().lower()
        if transport not in TRANSPORTS:
            raise ValueError(
                f"Contact transport must be one of {', '.join(TRANSPORTS)}."
            )
        object.__setattr__(self, "transport", transport)

        host = (self.host or "").strip()
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        if not host:
            raise ValueError("Contact host must be non-empty.")
        object.__setattr__(self, "host", host)

        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError("Contact port must be an integer.")
        if not 0 <= self.port <= PORT_MAX:
            raise ValueError(f"Contact port must be between 0 and {PORT_MAX}.")

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.transport}://{host}:{self.port}"

    @classmethod
    def parse(cls, text: str) -> "Contact":
        """Build a contact from ``transport://host:port`` (transport defaults to tcp).

        IPv6 hosts must be bracketed, e.g. ``utp://[::1]:5483``.
        """
        raw = (text or "").strip()
        transport, sep, rest = raw.partition("://")
        if not sep:
            transport, rest = TRANSPORT_TCP, raw
        host, sep, port = rest.rpartition(":")
        if not sep or not port.isdigit():
            raise ValueError(f"Contact must look like transport://host:port, got {text!r}.")
        if ":" in host and not (host.startswith("[") and host.endswith("]")):
            raise ValueError(f"IPv6 contact hosts must be bracketed, got {text!r}.")
        return cls(transport=transport, host=host, port=int(port))
