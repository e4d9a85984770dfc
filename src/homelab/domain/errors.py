"""Parse errors for the address and identity types.

All errors subclass ValueError so pydantic reports them as field-level
``value_error`` entries with the offending location attached.
"""

from __future__ import annotations


class MacParseError(ValueError):
    """Base class for hardware address parse failures."""


class MacTooLongError(MacParseError):
    """The address had more than six delimited parts."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"mac address is too long, got {count} bytes")


class MacTooShortError(MacParseError):
    """The address had fewer than six delimited parts."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"mac address is too short, got {count} bytes")


class MacByteParseError(MacParseError):
    """One delimited part was not a hex byte.

    Attributes:
        token: The exact substring that failed to parse.
        cause: The underlying numeric parse error.
    """

    def __init__(self, token: str, cause: ValueError) -> None:
        self.token = token
        self.cause = cause
        super().__init__(f'could not parse "{token}" as byte')


class WolPasswordParseError(ValueError):
    """The password was neither IPv4-shaped nor MAC-shaped."""

    def __init__(self) -> None:
        super().__init__("wol password was not in 4 byte or 6 byte format")
