"""Server settings for the receipt points service.

Settings are resolved in this order, later sources winning:
1. Built-in defaults
2. ``[server]`` table of an optional TOML file
3. Environment variables (RECEIPT_POINTS_HOST, RECEIPT_POINTS_PORT,
   RECEIPT_POINTS_LOG_LEVEL)
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from receipt_points.runtime.logging import LEVEL_NAMES, get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL_NAME = "INFO"


class SettingsError(ValueError):
    """Raised when a settings value cannot be used."""


@dataclass(frozen=True)
class ServerSettings:
    """Resolved settings for serving the HTTP API."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL_NAME

    @property
    def log_level_value(self) -> int:
        return LEVEL_NAMES[self.log_level]


def _coerce_port(raw: Any) -> int:
    try:
        port = int(raw)
    except (TypeError, ValueError) as exc:
        raise SettingsError(f"Invalid port: {raw!r}") from exc
    if not 0 < port < 65536:
        raise SettingsError(f"Port out of range: {port}")
    return port


def _coerce_log_level(raw: Any) -> str:
    name = str(raw).upper()
    if name not in LEVEL_NAMES:
        raise SettingsError(f"Unknown log level: {raw!r}")
    return name


def _load_toml_section(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        logger.debug("Settings file not found: %s", config_path)
        return {}

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("server", {})
    if not isinstance(section, dict):
        raise SettingsError(f"[server] in {config_path} must be a table")
    return section


def load_settings(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ServerSettings:
    """
    Resolve server settings from defaults, an optional TOML file and the environment.

    Args:
        config_path: Optional TOML file with a ``[server]`` table.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The resolved ServerSettings.

    Raises:
        SettingsError: If a port or log level value is invalid.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(_load_toml_section(Path(config_path)))

    if "RECEIPT_POINTS_HOST" in env:
        values["host"] = env["RECEIPT_POINTS_HOST"]
    if "RECEIPT_POINTS_PORT" in env:
        values["port"] = env["RECEIPT_POINTS_PORT"]
    if "RECEIPT_POINTS_LOG_LEVEL" in env:
        values["log_level"] = env["RECEIPT_POINTS_LOG_LEVEL"]

    return ServerSettings(
        host=str(values.get("host", DEFAULT_HOST)),
        port=_coerce_port(values.get("port", DEFAULT_PORT)),
        log_level=_coerce_log_level(values.get("log_level", DEFAULT_LOG_LEVEL_NAME)),
    )
