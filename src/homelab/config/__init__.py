"""Config layer — document models, discovery, settings and logging."""

from homelab.config.discovery import find_config, load_config, parse_config
from homelab.config.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigSyntaxError,
    ConfigValidationError,
    DuplicateNameError,
)
from homelab.config.models import Config, ConfigDocument, Network, NetworkWol, Server, ServerWol

__all__ = [
    "Config",
    "ConfigDocument",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigSyntaxError",
    "ConfigValidationError",
    "DuplicateNameError",
    "Network",
    "NetworkWol",
    "Server",
    "ServerWol",
    "find_config",
    "load_config",
    "parse_config",
]
