"""Tests for WolPassword shape detection."""

from ipaddress import IPv4Address

import pytest

from homelab.domain.errors import WolPasswordParseError
from homelab.domain.hardware_address import HardwareAddress
from homelab.domain.wol import FourBytePassword, SixBytePassword, WolPassword


class TestWolPasswordParse:
    def test_four(self) -> None:
        password = WolPassword.parse("1.2.3.4")
        assert password == FourBytePassword(IPv4Address("1.2.3.4"))

    def test_six(self) -> None:
        password = WolPassword.parse("00:11:22:33:44:55")
        assert password == SixBytePassword(HardwareAddress(0x00, 0x11, 0x22, 0x33, 0x44, 0x55))

    def test_six_with_dashes(self) -> None:
        assert isinstance(WolPassword.parse("00-11-22-33-44-55"), SixBytePassword)

    def test_error(self) -> None:
        with pytest.raises(WolPasswordParseError) as exc_info:
            WolPassword.parse("NotAPassword")
        assert str(exc_info.value) == "wol password was not in 4 byte or 6 byte format"

    def test_error_does_not_chain_underlying_causes(self) -> None:
        with pytest.raises(WolPasswordParseError) as exc_info:
            WolPassword.parse("00:11:22:33:44")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__context__ is None

    def test_display(self) -> None:
        assert str(WolPassword.parse("1.2.3.4")) == "1.2.3.4"
        assert str(WolPassword.parse("aa-bb-cc-dd-ee-ff")) == "AA:BB:CC:DD:EE:FF"

    def test_packed(self) -> None:
        assert WolPassword.parse("1.2.3.4").packed == b"\x01\x02\x03\x04"
        assert len(WolPassword.parse("00:11:22:33:44:55").packed) == 6

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            WolPassword()  # type: ignore[abstract]

    def test_coerce(self) -> None:
        assert WolPassword.coerce(IPv4Address("1.2.3.4")) == FourBytePassword(
            IPv4Address("1.2.3.4")
        )
        hw = HardwareAddress(1, 2, 3, 4, 5, 6)
        assert WolPassword.coerce(hw) == SixBytePassword(hw)
        with pytest.raises(WolPasswordParseError):
            WolPassword.coerce(1234)
