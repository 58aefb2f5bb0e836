"""Logging infrastructure for Doc Preview Core.

This module provides Prefect-integrated logging with YAML configuration
support. Every module in the library obtains its logger here.

Key components:
    get_preview_logger: Logger factory used by every library module
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from doc_preview_core.logging import get_preview_logger
    >>>
    >>> logger = get_preview_logger(__name__)
    >>> logger.info("Render started")

Note:
    Never import Python's logging module directly. Always use
    get_preview_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_preview_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "get_preview_logger",
    "setup_logging",
]
