"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from schema_descriptor.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- SDESC_LOG_TO_FILE: Enable file logging. Default: disabled
- SDESC_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from schema_descriptor.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("compiler.compiled", kind="object")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from structlog.types import Processor

from schema_descriptor.config import get_settings

_CONFIGURED = False


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().LOG_LEVEL
    except ValidationError:
        # Broken settings must not take logging down with them
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except ValidationError:
        return False


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    try:
        log_dir = Path(get_settings().log_file_dir)
    except ValidationError:
        log_dir = Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: schema-descriptor-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"schema-descriptor-{date_str}.log"


def configure_logging() -> None:
    """Configure structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Dual output (stdout + optional file)

    Safe to call more than once; only the first call installs handlers.
    Does nothing when the host application has already configured structlog.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    # Leave an existing host application setup alone
    if structlog.is_configured():
        _CONFIGURED = True
        return

    level = _get_log_level()
    package_logger = logging.getLogger("schema_descriptor")
    package_logger.setLevel(level)

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    package_logger.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


# Configure structlog on module import
configure_logging()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(schema_id="person", step="transform")
        >>> logger.debug("compiler.compiled", kind="object")
    """
    return structlog.get_logger().bind(**kwargs)
