"""Wake-on-LAN secure-on passwords.

A password is either four bytes written like an IPv4 address or six bytes
written like a hardware address. IPv4 is tried first, so any dotted quad
is always a :class:`FourBytePassword`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Any

from homelab.domain.errors import WolPasswordParseError
from homelab.domain.hardware_address import HardwareAddress
from homelab.domain.host import parse_ipv4


class WolPassword(ABC):
    """A secure-on password: :class:`FourBytePassword` or :class:`SixBytePassword`."""

    __slots__ = ()

    @staticmethod
    def parse(text: str) -> WolPassword:
        """Parse a 4-byte or 6-byte password.

        The underlying IPv4 and MAC errors are dropped; "neither shape" is
        the only thing a caller can act on.

        Raises:
            WolPasswordParseError: *text* matches neither shape.
        """
        try:
            return FourBytePassword(parse_ipv4(text))
        except ValueError:
            pass
        try:
            return SixBytePassword(HardwareAddress.parse(text))
        except ValueError:
            pass
        raise WolPasswordParseError

    @classmethod
    def coerce(cls, value: Any) -> WolPassword:
        if isinstance(value, WolPassword):
            return value
        if isinstance(value, IPv4Address):
            return FourBytePassword(value)
        if isinstance(value, HardwareAddress):
            return SixBytePassword(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise WolPasswordParseError

    @property
    @abstractmethod
    def packed(self) -> bytes:
        """The raw 4 or 6 password bytes as sent after the magic packet."""


@dataclass(frozen=True, slots=True)
class FourBytePassword(WolPassword):
    address: IPv4Address

    @property
    def packed(self) -> bytes:
        return self.address.packed

    def __str__(self) -> str:
        return str(self.address)


@dataclass(frozen=True, slots=True)
class SixBytePassword(WolPassword):
    address: HardwareAddress

    @property
    def packed(self) -> bytes:
        return self.address.packed

    def __str__(self) -> str:
        return str(self.address)
