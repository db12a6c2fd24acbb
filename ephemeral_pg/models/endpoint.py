"""Network endpoint value type."""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

IPAddress = Union[IPv4Address, IPv6Address]


@dataclass(frozen=True)
class Endpoint:
    """A validated host address and port.

    Only built from typed values or through ``Endpoint.parse``, never from
    raw text directly.
    """

    host: IPAddress
    port: int

    def __post_init__(self):
        if not isinstance(self.host, (IPv4Address, IPv6Address)):
            raise TypeError(f"host must be an IP address, got {type(self.host).__name__}")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")

    @classmethod
    def parse(cls, token: str) -> "Endpoint":
        """Parse ``a.b.c.d:port`` or ``[ipv6]:port``.

        Raises:
            ValueError: if the token is not a socket address.
        """
        host_part, sep, port_part = token.rpartition(":")
        if not sep or not host_part:
            raise ValueError(f"missing port separator in {token!r}")
        if not port_part.isascii() or not port_part.isdigit():
            raise ValueError(f"invalid port in {token!r}")

        if host_part.startswith("[") and host_part.endswith("]"):
            host = ip_address(host_part[1:-1])
            if not isinstance(host, IPv6Address):
                raise ValueError(f"bracketed address must be IPv6 in {token!r}")
        else:
            host = ip_address(host_part)
            if not isinstance(host, IPv4Address):
                raise ValueError(f"IPv6 address must be bracketed in {token!r}")

        return cls(host=host, port=int(port_part))

    @property
    def is_ipv6(self) -> bool:
        return isinstance(self.host, IPv6Address)

    @property
    def host_str(self) -> str:
        """Host as it appears in URLs, bracketed for IPv6."""
        return f"[{self.host}]" if self.is_ipv6 else str(self.host)

    @property
    def connect_host(self) -> str:
        """Host a client should dial.

        Docker reports wildcard bindings (``0.0.0.0``, ``::``); those are
        reached through the matching loopback address.
        """
        if self.host.is_unspecified:
            return "::1" if self.is_ipv6 else "127.0.0.1"
        return str(self.host)

    def as_tuple(self):
        """(host, port) pair accepted by ``socket.create_connection``."""
        return self.connect_host, self.port

    def __str__(self) -> str:
        return f"{self.host_str}:{self.port}"
