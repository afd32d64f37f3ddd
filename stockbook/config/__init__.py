"""Configuration module."""

from stockbook.config.logging import configure_logging, get_logger
from stockbook.config.settings import (
    LocaleSettings,
    Settings,
    StorageSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "StorageSettings",
    "LocaleSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
