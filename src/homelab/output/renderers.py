"""Rich renderers for a Config and for config errors.

Each renderer writes to a Rich Console (backed by StringIO) and returns
the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from homelab.domain.host import DomainHost, Host, IpHost
from homelab.domain.wol import FourBytePassword, SixBytePassword, WolPassword
from homelab.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Iterable

    from homelab.config.errors import ConfigError
    from homelab.config.models import Config, Network, Server


# ── Public API ────────────────────────────────────────────────────────


def render_config(config: Config) -> str:
    """Render networks and servers as two tables.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if config.networks is not None:
        console.print(_networks_table(config.networks.values()))
    console.print(_servers_table(config.servers.values()))

    return get_output(console).rstrip("\n")


def render_error(error: ConfigError) -> str:
    """Render a config error as an ERROR line followed by its message."""
    console = create_console()
    console.print(Text("ERROR", style="hl.error"), Text(type(error).__name__, style="hl.dim"))
    console.print(str(error), markup=False)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _describe_host(host: Host) -> str:
    match host:
        case IpHost(address=address):
            return f"{address} (ip)"
        case DomainHost(name=name):
            return f"{name} (domain)"
    return str(host)


def _describe_password(password: WolPassword | None) -> str:
    # The password value is a secret; show its shape only.
    match password:
        case None:
            return "-"
        case FourBytePassword():
            return "4-byte"
        case SixBytePassword():
            return "6-byte"
    return "set"


def _networks_table(networks: Iterable[Network]) -> Table:
    table = Table(title="Networks", title_justify="left")
    table.add_column("Name", style="hl.name")
    table.add_column("DNS", style="hl.addr")
    table.add_column("Domains")
    table.add_column("WoL broadcast", style="hl.addr")
    for network in networks:
        table.add_row(
            network.name,
            str(network.dns),
            ", ".join(network.domains) if network.domains else "-",
            str(network.wol.broadcast) if network.wol else "-",
        )
    return table


def _servers_table(servers: Iterable[Server]) -> Table:
    table = Table(title="Servers", title_justify="left")
    table.add_column("Name", style="hl.name")
    table.add_column("Host")
    table.add_column("MAC", style="hl.mac")
    table.add_column("Network")
    table.add_column("WoL broadcast", style="hl.addr")
    table.add_column("Password")
    for server in servers:
        wol = server.wol
        broadcast = wol.broadcast if wol else None
        table.add_row(
            server.name,
            _describe_host(server.host),
            str(server.mac),
            server.network or "-",
            str(broadcast) if broadcast is not None else "-",
            _describe_password(wol.password if wol else None),
        )
    return table
