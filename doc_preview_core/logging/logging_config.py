"""Logging setup for the preview renderer.

Library loggers come from Prefect's logger factory. A YAML ``dictConfig``
file replaces the built-in console configuration when one is found; a level
override is applied on top of either.

Environment variables:
    DOC_PREVIEW_LOGGING_CONFIG: Path to a YAML dictConfig file
    PREFECT_LOGGING_SETTINGS_PATH: Fallback config path
    DOC_PREVIEW_LOG_LEVEL: Level of the library loggers (default INFO)
"""

import logging.config
import os
from pathlib import Path
from typing import Any

import yaml
from prefect.logging import get_logger

from doc_preview_core.exceptions import LoggingConfigError

# Loggers the library writes to; a level override is applied to each.
PREVIEW_LOGGERS = (
    "doc_preview_core",
    "doc_preview_core.comments",
    "doc_preview_core.transformation",
    "doc_preview_core.server",
)

# uvicorn runs without its own log config and logs through this hierarchy.
SERVER_LOGGER = "uvicorn"

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s"

_CONFIG_PATH_VARIABLES = ("DOC_PREVIEW_LOGGING_CONFIG", "PREFECT_LOGGING_SETTINGS_PATH")


def find_config_file(config_path: Path | None = None) -> Path | None:
    """First of ``config_path`` and the path environment variables that is set."""
    if config_path is not None:
        return config_path
    for variable in _CONFIG_PATH_VARIABLES:
        if value := os.environ.get(variable):
            return Path(value)
    return None


def console_config(level: str | None = None) -> dict[str, Any]:
    """Built-in configuration: library and server loggers to stderr."""
    library_level = (level or os.environ.get("DOC_PREVIEW_LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"preview": {"format": LOG_FORMAT, "datefmt": "%H:%M:%S"}},
        "handlers": {
            "stderr": {"class": "logging.StreamHandler", "formatter": "preview", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            "doc_preview_core": {"level": library_level, "handlers": ["stderr"], "propagate": False},
            SERVER_LOGGER: {"level": "WARNING", "handlers": ["stderr"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["stderr"]},
    }


class LoggingConfig:
    """dictConfig for the library, read from YAML or built in.

    The file wins when it exists; otherwise ``console_config`` is used.
    The loaded mapping is cached on the instance.
    """

    def __init__(self, config_path: Path | None = None, level: str | None = None):
        self.config_path = find_config_file(config_path)
        self.level = level
        self._config: dict[str, Any] | None = None

    @property
    def from_file(self) -> bool:
        return self.config_path is not None and self.config_path.is_file()

    def load_config(self) -> dict[str, Any]:
        if self._config is None:
            self._config = self._read_file() if self.from_file else console_config(self.level)
        return self._config

    def _read_file(self) -> dict[str, Any]:
        assert self.config_path is not None
        with self.config_path.open(encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if not isinstance(loaded, dict):
            raise LoggingConfigError(f"Logging config {self.config_path} must be a YAML mapping")
        return loaded

    def apply(self) -> None:
        logging.config.dictConfig(self.load_config())


_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None) -> LoggingConfig:
    """Configure the library loggers.

    Args:
        config_path: YAML dictConfig file; defaults to the path environment variables.
        level: Level forced on every library logger and passed to Prefect,
               e.g. ``"DEBUG"`` from ``doc-preview --log-level``.
    """
    global _logging_config

    config = LoggingConfig(config_path, level)
    config.apply()
    if level:
        level = level.upper()
        for name in PREVIEW_LOGGERS:
            get_logger(name).setLevel(level)
        os.environ["PREFECT_LOGGING_LEVEL"] = level
    _logging_config = config
    return config


def get_preview_logger(name: str):
    """Logger for a library module; configures logging on first use."""
    if _logging_config is None:
        setup_logging()
    return get_logger(name)
