"""
Logging configuration for the smart home demo.

This module provides a centralized logging setup with support for:
- Console output with colored formatting (stderr, never stdout)
- Optional file rotation with size limits
- Optional remote logging to Loki
"""

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from typing import Optional

import colorlog
import httpx

from .configs import DEFAULT_DATE_FORMAT, DEFAULT_LOG_FORMAT, LOG_COLORS
from .infrastructure.settings import get_settings


# =============================================================================
# Loki Integration
# =============================================================================

def send_to_loki(url: str, level: str, message: str, app: str, timeout: float = 2.0) -> None:
    """
    Send a log entry to Loki.

    Args:
        url: Loki push endpoint.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        message: Log message.
        app: Application name for Loki labels.
        timeout: Request timeout in seconds.
    """
    try:
        log_entry = {
            "streams": [
                {
                    "stream": {"level": level, "app": app},
                    "values": [[str(int(time.time() * 1e9)), message]],
                }
            ]
        }
        headers = {"Content-Type": "application/json"}
        with httpx.Client() as client:
            client.post(url, json=log_entry, headers=headers, timeout=timeout)
    except httpx.HTTPError as e:
        # Avoid recursive logging
        print(f"[Loki send error]: {e}", file=sys.stderr)


class LokiHandler(logging.Handler):
    """
    Logging handler that pushes records to Loki.

    Attributes:
        url: Loki push endpoint.
        app: Application name for Loki labels.
        timeout: Request timeout in seconds.
    """

    def __init__(self, url: str, app: str, timeout: float = 2.0) -> None:
        super().__init__()
        self.url = url
        self.app = app
        self.timeout = timeout

    def emit(self, record: logging.LogRecord) -> None:
        """Format the record and push it to Loki."""
        try:
            message = self.format(record)
            send_to_loki(self.url, record.levelname.upper(), message, self.app, self.timeout)
        except Exception:
            self.handleError(record)


# =============================================================================
# Logger Factory
# =============================================================================

def get_logger(
    name: str,
    app: str = "smart_home",
    log_file: Optional[str] = None,
    level: int | str = logging.DEBUG,
    loki_url: Optional[str] = None,
) -> logging.Logger:
    """
    Create and configure a logger.

    The console handler is always attached; file and Loki handlers only
    when ``log_file`` or ``loki_url`` is given.

    Args:
        name: Logger name.
        app: Application name for Loki labels.
        log_file: Path to a rotating log file, or None.
        level: Logging level (default: DEBUG).
        loki_url: Loki push endpoint, or None.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)

    # Avoid duplicate handlers on repeated calls
    if logger_instance.handlers:
        return logger_instance

    settings = get_settings()

    # Console handler with colors
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(name)s | %(log_color)s%(asctime)s | %(levelname)s | "
            f"%(funcName)s:%(lineno)d | %(message)s",
            datefmt=DEFAULT_DATE_FORMAT,
            log_colors=LOG_COLORS,
        )
    )
    logger_instance.addHandler(console_handler)

    # File handler with rotation
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.logging.max_bytes,
            backupCount=settings.logging.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )
        logger_instance.addHandler(file_handler)

    # Loki handler
    if loki_url:
        loki_handler = LokiHandler(loki_url, app, timeout=settings.loki.timeout)
        loki_handler.setLevel(level)
        loki_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt=DEFAULT_DATE_FORMAT,
            )
        )
        logger_instance.addHandler(loki_handler)

    return logger_instance


# =============================================================================
# Default Logger Instance
# =============================================================================

_settings = get_settings()

logger = get_logger(
    name="SMART_HOME",
    app=_settings.loki.app,
    log_file=_settings.logging.log_file,
    level=_settings.logging.level,
    loki_url=_settings.loki.url,
)
