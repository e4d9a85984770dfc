"""HardwareAddress — a validated 6-octet link-layer address.

Accepted text forms split on ``:`` or ``-``, one hex byte per part:
``00:11:22:33:44:55`` and ``00-11-22-33-44-55`` parse to the same value.
The canonical form is uppercase and colon-separated.
"""

from __future__ import annotations

import re
from typing import Any

from homelab.domain.errors import (
    MacByteParseError,
    MacTooLongError,
    MacTooShortError,
)

OCTET_COUNT = 6

_SEPARATORS = re.compile(r"[:-]")
_HEX_BYTE = re.compile(r"\+?[0-9A-Fa-f]+")


def _parse_byte(token: str) -> int:
    """Parse one base-16 byte, raising ValueError with the integer-parse kind."""
    if not token:
        raise ValueError("cannot parse integer from empty string")
    if _HEX_BYTE.fullmatch(token) is None:
        raise ValueError("invalid digit found in string")
    value = int(token, 16)
    if value > 0xFF:
        raise ValueError("number too large to fit in target type")
    return value


class HardwareAddress:
    """An immutable six-octet hardware (MAC) address."""

    __slots__ = ("_octets",)

    def __init__(self, a: int, b: int, c: int, d: int, e: int, f: int) -> None:
        octets = (a, b, c, d, e, f)
        for octet in octets:
            if not isinstance(octet, int) or not 0 <= octet <= 0xFF:
                raise ValueError(f"octet out of range: {octet!r}")
        object.__setattr__(self, "_octets", octets)

    @classmethod
    def parse(cls, text: str) -> HardwareAddress:
        """Parse a colon- or dash-delimited hex string.

        Raises:
            MacTooLongError: More than six parts.
            MacTooShortError: Fewer than six parts.
            MacByteParseError: A part is not a hex byte; names the part.
        """
        parts = _SEPARATORS.split(text)
        if len(parts) > OCTET_COUNT:
            raise MacTooLongError(len(parts))
        if len(parts) < OCTET_COUNT:
            raise MacTooShortError(len(parts))

        octets: list[int] = []
        for part in parts:
            try:
                octets.append(_parse_byte(part))
            except ValueError as exc:
                raise MacByteParseError(part, exc) from exc
        return cls(*octets)

    @classmethod
    def from_bytes(cls, data: bytes) -> HardwareAddress:
        """Lift a 6-byte value."""
        if len(data) != OCTET_COUNT:
            raise ValueError(f"expected {OCTET_COUNT} bytes, got {len(data)}")
        return cls(*data)

    @classmethod
    def coerce(cls, value: Any) -> HardwareAddress:
        """Accept an existing address or parse text; used by pydantic fields."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a hardware address string, got {type(value).__name__}")

    @property
    def octets(self) -> tuple[int, int, int, int, int, int]:
        return self._octets

    @property
    def packed(self) -> bytes:
        return bytes(self._octets)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self._octets)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HardwareAddress):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

    def __str__(self) -> str:
        return ":".join(f"{octet:02X}" for octet in self._octets)

    def __repr__(self) -> str:
        return f"HardwareAddress('{self}')"
