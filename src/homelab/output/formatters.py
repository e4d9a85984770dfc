"""Human/JSON output helpers.

The CLI renders a Config for humans (Rich tables) or machines (--json).
JSON output is the document form, so it can be fed back to the parser.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from homelab.output.renderers import render_config

if TYPE_CHECKING:
    from homelab.config.models import Config


def format_config(config: Config, *, json_output: bool = False) -> str:
    """Format a Config for display.

    Args:
        config: The validated config.
        json_output: If True, return JSON; otherwise return Rich-rendered text.
    """
    if json_output:
        return _json.dumps(config.to_document(), indent=2)
    return render_config(config)


def format_summary(config: Config) -> str:
    """One-line count summary used by ``hl check``."""
    networks = len(config.networks or {})
    return f"OK: {networks} networks, {len(config.servers)} servers"
