"""Logging setup for neo-catalog consumers.

Translates ``CatalogSettings`` (verbosity, library level, format) into a
``logging.config.dictConfig`` mapping. Host applications that already own
their logging setup can skip this and just configure the ``neo_catalog``
logger.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import CatalogSettings, get_settings

logger = logging.getLogger(__name__)


class LogVerbosity(str, Enum):
    """Root logger verbosity."""
    QUIET = "QUIET"
    NORMAL = "NORMAL"
    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"


_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Root level for a verbosity name; unknown names fall back to WARNING."""
    try:
        return _VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())]
    except ValueError:
        return "WARNING"


class LoggingConfig:
    """Builds and applies the neo-catalog logging configuration."""

    # Per-entry expiry and eviction messages; muted unless debugging
    DEFAULT_QUIET_MODULES = (
        "neo_catalog.platform.tags.infrastructure.caches",
    )

    # Transport noise from the TestClient / host application
    ERROR_ONLY_MODULES = (
        "httpx",
        "httpcore",
        "asyncio",
    )

    FORMATS = {
        "simple": "%(asctime)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        "json": '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
    }

    @classmethod
    def build(cls, settings: Optional[CatalogSettings] = None) -> Dict[str, Any]:
        """dictConfig mapping for the given (or environment) settings."""
        settings = settings or get_settings()
        root_level = get_log_level_from_verbosity(settings.log_verbosity)
        quiet_level = "DEBUG" if root_level == "DEBUG" else "WARNING"

        loggers: Dict[str, Dict[str, Any]] = {
            "neo_catalog": {"level": settings.log_level.upper(), "propagate": True},
        }
        loggers.update({name: cls._isolated(quiet_level) for name in cls.DEFAULT_QUIET_MODULES})
        loggers.update({name: cls._isolated("ERROR") for name in cls.ERROR_ONLY_MODULES})

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": cls.FORMATS.get(settings.log_format, cls.FORMATS["simple"]),
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": root_level, "handlers": ["console"]},
            "loggers": loggers,
        }

    @classmethod
    def configure(cls, settings: Optional[CatalogSettings] = None) -> None:
        """Apply the configuration."""
        config = cls.build(settings)
        logging.config.dictConfig(config)
        logger.debug(
            f"Logging configured: root={config['root']['level']}, "
            f"neo_catalog={config['loggers']['neo_catalog']['level']}"
        )

    @staticmethod
    def _isolated(level: str) -> Dict[str, Any]:
        return {"level": level, "handlers": ["console"], "propagate": False}


def setup_logging(settings: Optional[CatalogSettings] = None) -> None:
    """Configure logging for neo-catalog consumers."""
    LoggingConfig.configure(settings)
