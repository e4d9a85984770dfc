"""Config file discovery and loading.

Walk-up finder locates client.toml, similar to how git finds .git/.
Supports HOMELAB_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from structlog.contextvars import bound_contextvars

from homelab.config.errors import ConfigNotFoundError, ConfigReadError, ConfigSyntaxError
from homelab.config.models import Config

CONFIG_FILENAME = "client.toml"
CONFIG_ENV_VAR = "HOMELAB_CONFIG"

logger = logging.getLogger(__name__)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for client.toml.

    Returns the path to the config file, or None if not found.
    Checks HOMELAB_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def parse_config(raw: bytes | str) -> Config:
    """Decode TOML text into a validated Config.

    Raises:
        ConfigSyntaxError: *raw* is not valid TOML (or not UTF-8).
        ConfigValidationError: The document shape or a leaf value is invalid.
        DuplicateNameError: Two networks or two servers share a name.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = tomllib.loads(text)
    except UnicodeDecodeError as exc:
        raise ConfigSyntaxError(f"not UTF-8: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigSyntaxError(str(exc)) from exc
    return Config.from_document(data)


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.

    Raises:
        ConfigNotFoundError: No path given and none discovered.
        ConfigReadError: The file could not be read.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        raise ConfigNotFoundError(
            (cwd or Path.cwd()).resolve(),
            env_path=Path(env_path) if env_path else None,
        )

    with bound_contextvars(config_path=str(path)):
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise ConfigReadError(path, exc) from exc

        config = parse_config(raw)
        logger.debug(
            "Loaded config",
            extra={"networks": len(config.networks or {}), "servers": len(config.servers)},
        )
    return config
