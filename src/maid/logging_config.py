"""
Centralized Logging Configuration

Configures the ``maid`` logger hierarchy once per process. Console output goes
to stderr so it never interleaves with the rich progress display on stdout.

Usage:
    from maid.logging_config import configure_logging

    configure_logging(log_level="DEBUG")
    configure_logging(log_dir=Path("logs"))  # also write maid_<timestamp>.log

Environment Variables:
    MAID_LOG_DIR - Default log directory when none is passed
    MAID_LOG_LEVEL - Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "maid"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_default_log_dir() -> Optional[Path]:
    """Return the log directory from ``MAID_LOG_DIR``, if set."""
    if "MAID_LOG_DIR" in os.environ:
        return Path(os.environ["MAID_LOG_DIR"])
    return None


def configure_logging(
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    log_to_console: bool = True,
    log_filename: Optional[str] = None,
) -> logging.Logger:
    """
    Configure centralized logging for maid.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for a log file; no file handler when None
        log_to_console: Whether to log to stderr
        log_filename: Custom log filename (defaults to maid_<timestamp>.log)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    if log_level is None:
        log_level = os.environ.get("MAID_LOG_LEVEL", "INFO")
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir is None:
        log_dir = get_default_log_dir()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        if log_filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_filename = f"maid_{timestamp}.log"

        log_path = log_dir / log_filename

        # File handler records everything, console honours the requested level
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.setLevel(min(level, logging.DEBUG))

        logger.debug(f"Logging to: {log_path}")

    return logger
