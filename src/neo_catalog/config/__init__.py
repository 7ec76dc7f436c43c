"""Configuration management for neo-catalog."""

from .settings import CatalogSettings, get_settings
from .logging_config import LoggingConfig, LogVerbosity, setup_logging

__all__ = [
    "CatalogSettings",
    "get_settings",
    "LoggingConfig",
    "LogVerbosity",
    "setup_logging",
]
