"""Host — a numeric IPv4 address or a domain name.

Parsing never fails: text that is a strict dotted quad becomes an
:class:`IpHost`, anything else becomes a :class:`DomainHost` kept verbatim.
Whether a domain resolves is the resolver's concern, not this layer's.
"""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import AddressValueError, IPv4Address
from typing import Any


def parse_ipv4(text: str) -> IPv4Address:
    """Parse a strict dotted-quad IPv4 address.

    Only text is accepted; integer and packed forms are rejected so that a
    document value like ``dns = 3232235777`` is not silently an address.

    Raises:
        ValueError: *text* is not a dotted-quad string.
    """
    if not isinstance(text, str):
        raise ValueError(f"expected an IPv4 address string, got {type(text).__name__}")
    try:
        return IPv4Address(text)
    except AddressValueError as exc:
        raise ValueError(str(exc)) from exc


def coerce_ipv4(value: Any) -> IPv4Address:
    """Accept an existing address or parse text; used by pydantic fields."""
    if isinstance(value, IPv4Address):
        return value
    return parse_ipv4(value)


class Host:
    """A network endpoint reference: :class:`IpHost` or :class:`DomainHost`."""

    __slots__ = ()

    @staticmethod
    def parse(text: str) -> Host:
        try:
            return IpHost(parse_ipv4(text))
        except ValueError:
            return DomainHost(text)

    @classmethod
    def coerce(cls, value: Any) -> Host:
        if isinstance(value, Host):
            return value
        if isinstance(value, IPv4Address):
            return IpHost(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a host string, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class IpHost(Host):
    address: IPv4Address

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True, slots=True)
class DomainHost(Host):
    name: str

    def __str__(self) -> str:
        return self.name
