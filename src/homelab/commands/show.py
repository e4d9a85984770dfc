"""Command: print the validated inventory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homelab.commands._base import HlCommand

if TYPE_CHECKING:
    from homelab.commands._context import AppContext


@click.command(
    cls=HlCommand,
    examples="""\
  hl show
  hl --json show
  hl -c ./client.toml show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Print networks and servers from the config file."""
    from homelab.output.formatters import format_config

    app.emit(format_config(app.config, json_output=app.settings.json_output))
