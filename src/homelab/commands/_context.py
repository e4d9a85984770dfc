"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Loads the inventory lazily and routes output and
errors (stdout/stderr + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from homelab.config.discovery import load_config
from homelab.config.errors import ConfigError
from homelab.output.renderers import render_error

if TYPE_CHECKING:
    from homelab.config.models import Config
    from homelab.config.settings import HomelabSettings

logger = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The config is loaded on first use so ``--help`` and ``--version``
    never touch the filesystem.
    """

    def __init__(self, settings: HomelabSettings) -> None:
        self.settings = settings
        self._config: Config | None = None

        from homelab.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def config(self) -> Config:
        """The validated inventory; exits with code 1 on any ConfigError."""
        if self._config is None:
            try:
                self._config = load_config(self.settings.config_path, self.settings.start_dir)
            except ConfigError as exc:
                logger.debug("config load failed", error=type(exc).__name__)
                self.fail(exc)
        return self._config

    def emit(self, output: str) -> None:
        click.echo(output)

    def fail(self, error: ConfigError) -> None:
        """Write *error* to stderr and exit with code 1."""
        click.echo(render_error(error), err=True)
        raise SystemExit(1)
