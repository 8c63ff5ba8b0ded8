"""
utils/logger.py
---------------
Centralized logging configuration.
All modules should use `get_logger(__name__)` to obtain a logger instance.

uvicorn's own loggers are routed through the same stdout handler, so
server and access lines share the application's format and level.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
_initialized = False


def _init_logging() -> None:
    """Configure the root logger once and hand uvicorn's loggers to it."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A configured logging.Logger.
    """
    _init_logging()
    return logging.getLogger(name)
