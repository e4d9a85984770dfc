"""Shared pytest fixtures and sample documents for homelab tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SAMPLE_TOML = """\
[[network]]
name = "home"
dns = "192.168.1.1"
domains = ["home.arpa", "lan"]
wol = { broadcast = "192.168.1.255" }

[[network]]
name = "lab"
dns = "10.0.0.1"

[[server]]
name = "nas"
host = "nas.home.arpa"
mac = "00:11:22:33:44:55"
network = "home"
wol = { broadcast = "192.168.1.255", password = "1.2.3.4" }

[[server]]
name = "pve"
host = "10.0.0.20"
mac = "aa-bb-cc-dd-ee-ff"
network = "lab"
"""


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's HOMELAB_* environment out of the tests."""
    for name in (
        "HOMELAB_CONFIG",
        "HOMELAB_CONFIG_PATH",
        "HOMELAB_VERBOSE",
        "HOMELAB_JSON_OUTPUT",
        "HOMELAB_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after tests that configure logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    homelab = logging.getLogger("homelab")
    homelab_level = homelab.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    homelab.setLevel(homelab_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A client.toml holding SAMPLE_TOML."""
    path = tmp_path / "client.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    return path
