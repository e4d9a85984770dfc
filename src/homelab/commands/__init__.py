"""Subcommand modules for hl.

Provides register_commands() which uses deferred imports to keep
``hl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from homelab.commands.check import check
    from homelab.commands.show import show

    cli.add_command(show)
    cli.add_command(check)
