"""Domain layer — address and identity types.

This layer depends only on stdlib and pydantic.
It must never import from config, output, or commands.
"""

from homelab.domain.errors import (
    MacByteParseError,
    MacParseError,
    MacTooLongError,
    MacTooShortError,
    WolPasswordParseError,
)
from homelab.domain.hardware_address import HardwareAddress
from homelab.domain.host import DomainHost, Host, IpHost, parse_ipv4
from homelab.domain.wol import FourBytePassword, SixBytePassword, WolPassword

__all__ = [
    "DomainHost",
    "FourBytePassword",
    "HardwareAddress",
    "Host",
    "IpHost",
    "MacByteParseError",
    "MacParseError",
    "MacTooLongError",
    "MacTooShortError",
    "SixBytePassword",
    "WolPassword",
    "WolPasswordParseError",
    "parse_ipv4",
]
