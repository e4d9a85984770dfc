"""CLI settings — flags and env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``HOMELAB_*`` prefix
  3. Code defaults

The inventory document itself is not a settings source; it is loaded
separately by :func:`homelab.config.discovery.load_config`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings


class HomelabSettings(BaseSettings):
    """Unified settings for the hl CLI.

    Attributes:
        config_path: Explicit ``--config`` override, or None for discovery.
        start_dir: Directory the walk-up discovery starts from.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HOMELAB_",
    }

    config_path: Path | None = None
    start_dir: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, *, config_path: str | None = None, **cli_flags: Any) -> HomelabSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (``False``/``None``) do not mask
        env vars; only flags the user actually set are passed as overrides.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        if config_path:
            overrides["config_path"] = Path(config_path)
        return cls(**overrides)
