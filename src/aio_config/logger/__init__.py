"""
aio-config Logger Module

Usage:
    from aio_config.logger import get_logger, create_logger

    logger = get_logger()
    logger.debug("reloading configuration")

    logger = create_logger(name="aioconfig", level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name ("aioconfig" -> AIOCONFIG).
    The default name has no underscore after "AIO" on purpose, so these
    variables are never picked up as AIO_* configuration overrides.
"""

import logging
import os
from typing import Optional

from .interface import Logger
from .memory_logger import LogEntry, MemoryLogger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

DEFAULT_LOGGER_NAME = "aioconfig"


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "aioconfig" -> "AIOCONFIG"
        "my-tool" -> "MY_TOOL"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def create_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON. The default level is WARNING,
    which hides the resolver's debug diagnostics unless asked for.

    Args:
        name: Logger name
        level: Logging level
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level_str = os.environ.get(f"{env_prefix}_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_str, logging.WARNING)

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """Get a logger configured from environment variables.

    Example:
        # export AIOCONFIG_LOG_LEVEL=DEBUG
        logger = get_logger()
    """
    return create_logger(name=name)


__all__ = [
    "Logger",
    "StructuredLogger",
    "MemoryLogger",
    "LogEntry",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
    "DEFAULT_LOGGER_NAME",
]
