"""Command: validate the config file without printing it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from homelab.commands._base import HlCommand

if TYPE_CHECKING:
    from homelab.commands._context import AppContext


@click.command(
    cls=HlCommand,
    examples="""\
  hl check
  HOMELAB_CONFIG=/etc/homelab/client.toml hl check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate the config file and report entry counts."""
    from homelab.output.formatters import format_summary

    app.emit(format_summary(app.config))
