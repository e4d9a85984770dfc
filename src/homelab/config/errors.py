"""Config document errors.

Every failure while turning a document into a Config is one ConfigError.
Nothing is recovered or defaulted: the first violation ends the decode.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError


class ConfigError(Exception):
    """Base class for all config loading and decoding failures."""


class ConfigSyntaxError(ConfigError):
    """The document is not valid TOML."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid TOML: {detail}")


class ConfigValidationError(ConfigError):
    """The document shape or a leaf value is invalid.

    Wraps the pydantic ValidationError; each entry in :attr:`errors` carries
    the field location, error type and message.
    """

    def __init__(self, exc: ValidationError) -> None:
        self.errors: list[dict[str, Any]] = [
            {"loc": err["loc"], "type": err["type"], "msg": err["msg"]}
            for err in exc.errors(include_url=False)
        ]
        lines = [f"{len(self.errors)} error(s) in config document"]
        for err in self.errors:
            loc = ".".join(str(part) for part in err["loc"]) or "<document>"
            lines.append(f"  {loc}: {err['msg']}")
        super().__init__("\n".join(lines))

    def _locs_of_type(self, error_type: str) -> list[str]:
        return [
            ".".join(str(part) for part in err["loc"])
            for err in self.errors
            if err["type"] == error_type
        ]

    @property
    def missing_fields(self) -> list[str]:
        """Dotted locations of required fields absent from the document."""
        return self._locs_of_type("missing")

    @property
    def unknown_fields(self) -> list[str]:
        """Dotted locations of keys the document must not contain."""
        return self._locs_of_type("extra_forbidden")


class DuplicateNameError(ConfigError):
    """Two entries in one collection share a name.

    Attributes:
        kind: ``"network name"`` or ``"server name"``.
        name: The repeated name.
    """

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"duplicate field `{kind}`: {name!r}")


class ConfigNotFoundError(ConfigError):
    """No config file was given and none was discovered."""

    def __init__(self, start: Path, env_path: Path | None = None) -> None:
        self.start = start
        self.env_path = env_path
        if env_path is not None:
            super().__init__(f"HOMELAB_CONFIG points to a missing file: {env_path}")
        else:
            super().__init__(f"no config file found from {start}")


class ConfigReadError(ConfigError):
    """The config file exists but could not be read."""

    def __init__(self, path: Path, exc: OSError) -> None:
        self.path = path
        super().__init__(f"could not read {path}: {exc.strerror or exc}")
