"""
Logging configuration for paramguard services.

Every line uses one format regardless of which component emitted it:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: "TRACE", "DEBUG" or "INFO" (default)
               - INFO: one line per rejected request
               - DEBUG: one line per validator run
               - TRACE: request cache hits

Usage:
    from paramguard.logging_config import configure_logging, get_logger

    configure_logging(source="api")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from datetime import UTC, datetime

# Below DEBUG, for cache hits and other per-call noise
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS = {"TRACE": TRACE, "DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING}


class ISO8601Formatter(logging.Formatter):
    """Formatter producing UTC ISO8601 timestamps and a bracketed source tag."""

    def __init__(self, source: str = "paramguard"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Suppress access-log lines for health endpoints unless logging at DEBUG.

    Load balancers poll these every few seconds and drown out rejections.
    """

    def __init__(self, paths: Iterable[str] = ("/health", "/api/health")):
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True
        message = record.getMessage()
        return not any(path in message and ("GET" in message or "200" in message) for path in self.paths)


def resolve_level(level: int | str | None = None, debug: bool | None = None) -> int:
    """
    Work out the effective log level.

    An explicit ``level`` wins, then ``debug``, then the LOG_LEVEL environment
    variable. Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    if debug:
        return logging.DEBUG
    name = (level or os.getenv("LOG_LEVEL", "")).upper()
    return LEVELS.get(name, logging.INFO)


def configure_logging(
    source: str = "paramguard",
    level: int | str | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Install the unified stdout handler on the root and uvicorn loggers.

    Args:
        source: Tag shown in brackets (e.g., "api")
        level: Level number or name; defaults to LOG_LEVEL or INFO
        debug: Force DEBUG when no explicit level is given

    Returns:
        The configured root logger
    """
    effective = resolve_level(level, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(effective)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(effective)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())
    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; route them through ours instead
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(effective)
        uvicorn_logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
