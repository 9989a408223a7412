"""Runtime infrastructure for the receipt points service.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings resolution via load_settings(), ServerSettings
- The in-memory ReceiptRegistry

Usage:
    from receipt_points.runtime import get_logger, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
    print(settings.host, settings.port)
"""

from receipt_points.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from receipt_points.runtime.receipt_registry import ReceiptNotFoundError, ReceiptRegistry
from receipt_points.runtime.settings import ServerSettings, SettingsError, load_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Registry
    "ReceiptRegistry",
    "ReceiptNotFoundError",
    # Settings
    "ServerSettings",
    "SettingsError",
    "load_settings",
]
