"""
Logging for the personal site.

Modules log through :func:`get_logger`, which binds the module name so every
console and file line shows where it came from. Messages logged without a
bound name are attributed to the package itself.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from personal_site.config import LoggingConfig, get_config

PACKAGE_NAME = "personal_site"


def _build_handlers(log_config: LoggingConfig, level: str, fmt: str, log_file: str,
                    rotation: str, retention: str) -> list[dict]:
    handlers = []

    if log_config.console_enabled:
        handlers.append({
            "sink": sys.stderr,
            "level": level,
            "format": fmt,
            "colorize": True,
            "diagnose": False,
        })

    if log_config.file_enabled:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append({
            "sink": log_file,
            "level": level,
            "format": fmt,
            "rotation": rotation,
            "retention": retention,
            "compression": "zip",
            "encoding": "utf-8",
            "enqueue": True,  # Flask may serve from several threads
            "diagnose": False,
        })

    return handlers


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: Optional[str] = None,
    retention: Optional[str] = None,
    format: Optional[str] = None,
) -> None:
    """Replace all handlers with the ones described by the logging settings.

    Keyword arguments override the configured values.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, etc.)
        log_file: Path to log file
        rotation: Log rotation setting (e.g., "10 MB", "1 day")
        retention: Log retention setting (e.g., "14 days", "1 week")
        format: Log format string
    """
    log_config = get_config().logging

    handlers = _build_handlers(
        log_config,
        level=level or log_config.level,
        fmt=format or log_config.format,
        log_file=log_file or log_config.file_path,
        rotation=rotation or log_config.rotation,
        retention=retention or log_config.retention,
    )
    logger.configure(handlers=handlers, extra={"name": PACKAGE_NAME})


def get_logger(name: Optional[str] = None):
    """Get the site logger, bound to a module name when one is given.

    Args:
        name: Logger name (typically __name__ from calling module)
    """
    if name:
        return logger.bind(name=name)
    return logger


__all__ = [
    "PACKAGE_NAME",
    "setup_logger",
    "get_logger",
    "logger",
]
