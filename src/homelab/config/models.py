"""Pydantic models for the host inventory document.

Document contract (``client.toml``)::

    [[network]]            # optional, repeatable
    name = "home"
    dns = "192.168.1.1"
    domains = ["home.arpa"]
    wol = { broadcast = "192.168.1.255" }

    [[server]]             # the key is required; ``server = []`` is legal
    name = "nas"
    host = "nas.home.arpa"
    mac = "00:11:22:33:44:55"
    network = "home"
    wol = { broadcast = "192.168.1.255", password = "1.2.3.4" }

INVARIANT: names are unique within networks and within servers. A repeated
name fails the whole document; nothing is overwritten.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError, model_validator

from homelab.config.errors import ConfigValidationError, DuplicateNameError
from homelab.domain.fields import HostField, Ipv4Field, MacField, WolPasswordField

# --- Entries ---


class NetworkWol(BaseModel):
    """[network.wol] table."""

    model_config = {"frozen": True}

    broadcast: Ipv4Field


class Network(BaseModel):
    """One [[network]] entry."""

    model_config = {"frozen": True}

    name: str
    dns: Ipv4Field
    domains: list[str] | None = None
    wol: NetworkWol | None = None


class ServerWol(BaseModel):
    """[server.wol] table — per-server overrides."""

    model_config = {"frozen": True}

    broadcast: Ipv4Field | None = None
    password: WolPasswordField | None = None


class Server(BaseModel):
    """One [[server]] entry.

    ``network`` names a network entry but is not checked against the
    networks mapping; networks are advisory.
    """

    model_config = {"frozen": True}

    name: str
    host: HostField
    mac: MacField
    network: str | None = None
    wol: ServerWol | None = None


# --- Document and aggregate ---


class ConfigDocument(BaseModel):
    """The raw document: top-level keys exactly ``network`` and ``server``."""

    model_config = {"frozen": True, "extra": "forbid"}

    network: list[Network] | None = None
    server: list[Server]


_Entry = TypeVar("_Entry", Network, Server)


def _fold_by_name(entries: Iterable[_Entry], kind: str) -> dict[str, _Entry]:
    """Key *entries* by name, failing on the first repeated name."""
    folded: dict[str, _Entry] = {}
    for entry in entries:
        if entry.name in folded:
            raise DuplicateNameError(kind, entry.name)
        folded[entry.name] = entry
    return folded


class Config(BaseModel):
    """Validated inventory: networks and servers keyed by unique name."""

    model_config = {"frozen": True}

    networks: dict[str, Network] | None = None
    servers: dict[str, Server]

    @model_validator(mode="after")
    def _keys_match_names(self) -> Config:
        """Each mapping key is its entry's name, so to_document() loses nothing."""
        for kind, entries in (("network", self.networks or {}), ("server", self.servers)):
            for key, entry in entries.items():
                if key != entry.name:
                    raise ValueError(
                        f"{kind} key {key!r} does not match entry name {entry.name!r}"
                    )
        return self

    @classmethod
    def from_document(cls, data: Mapping[str, Any]) -> Config:
        """Decode a parsed document mapping into a Config.

        Raises:
            ConfigValidationError: Unknown top-level key, missing ``server``,
                or an invalid entry/leaf value.
            DuplicateNameError: Two networks or two servers share a name.
        """
        try:
            document = ConfigDocument.model_validate(data)
        except ValidationError as exc:
            raise ConfigValidationError(exc) from exc

        networks = None
        if document.network is not None:
            networks = _fold_by_name(document.network, "network name")
        servers = _fold_by_name(document.server, "server name")
        return cls(networks=networks, servers=servers)

    def to_document(self) -> dict[str, Any]:
        """Return the document form, leaf values as canonical text.

        ``Config.from_document(config.to_document()) == config``.
        """
        document: dict[str, Any] = {}
        if self.networks is not None:
            document["network"] = [
                network.model_dump(mode="json", exclude_none=True)
                for network in self.networks.values()
            ]
        document["server"] = [
            server.model_dump(mode="json", exclude_none=True) for server in self.servers.values()
        ]
        return document
