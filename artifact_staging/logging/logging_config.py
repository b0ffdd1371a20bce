"""Centralized logging configuration for Artifact Staging.

Integrates with Prefect's logging system and supports both YAML-based
configuration and programmatic setup.

Usage:
    >>> from artifact_staging.logging import get_pipeline_logger
    >>> logger = get_pipeline_logger(__name__)
    >>> logger.info("Staging started")

Environment variables:
    ARTIFACT_STAGING_LOGGING_CONFIG: Path to custom logging.yml
    ARTIFACT_STAGING_LOG_LEVEL: Default log level (INFO, DEBUG, etc.)
    PREFECT_LOGGING_SETTINGS_PATH: Alternative config path
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

# Prefect's get_logger() nests every logger under "prefect."
LOGGER_ROOT = "prefect.artifact_staging"

DEFAULT_LOG_LEVELS = {
    "artifact_staging": "INFO",
    "artifact_staging.staging": "INFO",
    "artifact_staging.hashing": "INFO",
    "artifact_staging.publication": "INFO",
}


class LoggingConfig:
    """Manages logging configuration for the staging protocol.

    Configuration precedence:
        1. Explicit config_path parameter
        2. ARTIFACT_STAGING_LOGGING_CONFIG environment variable
        3. PREFECT_LOGGING_SETTINGS_PATH environment variable
        4. Default configuration

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _get_default_config_path() -> Optional[Path]:
        if env_path := os.environ.get("ARTIFACT_STAGING_LOGGING_CONFIG"):
            return Path(env_path)

        if prefect_path := os.environ.get("PREFECT_LOGGING_SETTINGS_PATH"):
            return Path(prefect_path)

        return None

    def load_config(self) -> Dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in ``logging.config.dictConfig`` format.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Default format: "HH:MM:SS.mmm | LEVEL | logger.name - message"."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                LOGGER_ROOT: {
                    "level": os.environ.get("ARTIFACT_STAGING_LOG_LEVEL", "INFO"),
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    def apply(self):
        """Apply the configuration with ``logging.config.dictConfig``.

        Also exports PREFECT_LOGGING_LEVEL when the configuration has a
        ``prefect`` logger entry.
        """
        config = self.load_config()
        logging.config.dictConfig(config)

        if "prefect" in config.get("loggers", {}):
            prefect_level = config["loggers"]["prefect"].get("level", "INFO")
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_level)


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Setup logging for the staging library.

    Args:
        config_path: Optional path to YAML logging configuration file.
        level: Optional log level override applied to every staging logger.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logger = get_logger(logger_name)
            logger.setLevel(level)


def get_pipeline_logger(name: str):
    """Get a Prefect-integrated logger, initializing logging on first use.

    Args:
        name: Logger name, typically ``__name__``.
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
