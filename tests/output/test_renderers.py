"""Tests for Rich rendering and JSON formatting of a Config."""

import json

from homelab.config.discovery import parse_config
from homelab.config.errors import DuplicateNameError
from homelab.output.formatters import format_config, format_summary
from homelab.output.renderers import render_config, render_error
from tests.conftest import SAMPLE_TOML


class TestRenderConfig:
    def test_tables(self) -> None:
        output = render_config(parse_config(SAMPLE_TOML))
        assert "Networks" in output
        assert "Servers" in output
        assert "home.arpa" in output
        assert "00:11:22:33:44:55" in output
        assert "AA:BB:CC:DD:EE:FF" in output

    def test_host_kind(self) -> None:
        output = render_config(parse_config(SAMPLE_TOML))
        assert "nas.home.arpa (domain)" in output
        assert "10.0.0.20 (ip)" in output

    def test_password_shape_not_value(self) -> None:
        output = render_config(parse_config(SAMPLE_TOML))
        assert "4-byte" in output
        assert "1.2.3.4" not in output

    def test_no_networks_table_when_absent(self) -> None:
        output = render_config(parse_config("server = []\n"))
        assert "Networks" not in output
        assert "Servers" in output


class TestRenderError:
    def test_error(self) -> None:
        output = render_error(DuplicateNameError("server name", "nas"))
        assert "ERROR" in output
        assert "DuplicateNameError" in output
        assert "server name" in output


class TestFormatters:
    def test_json_is_document_form(self) -> None:
        cfg = parse_config(SAMPLE_TOML)
        doc = json.loads(format_config(cfg, json_output=True))
        assert [s["name"] for s in doc["server"]] == ["nas", "pve"]
        assert doc["server"][1]["mac"] == "AA:BB:CC:DD:EE:FF"

    def test_human(self) -> None:
        cfg = parse_config(SAMPLE_TOML)
        assert "Servers" in format_config(cfg)

    def test_summary(self) -> None:
        assert format_summary(parse_config(SAMPLE_TOML)) == "OK: 2 networks, 2 servers"
        assert format_summary(parse_config("server = []\n")) == "OK: 0 networks, 0 servers"
