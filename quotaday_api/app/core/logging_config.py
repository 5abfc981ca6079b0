"""
Logging configuration shared by the application and the server.

``setup_logging`` installs Quotaday's console handler (and, when a log
file is configured, a file handler) on the root logger.  The handlers
are named, so calling it again, e.g. once from the CLI and once from
``create_app``, never duplicates them, and a log file configured
later is still picked up.

Uvicorn's loggers are folded into the same output: ``uvicorn`` and
``uvicorn.error`` lose their own handlers and propagate to the root
logger, so server messages share the application format.
``uvicorn.access`` is switched off because
``RequestLoggingMiddleware`` already writes one access line per
request, including the client address behind proxies.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "quotaday.console"
FILE_HANDLER = "quotaday.file"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error")
_ACCESS_LOGGER = "uvicorn.access"


def _installed(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _add_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def route_server_loggers(level: int) -> None:
    """Send uvicorn's logs through the root logger and mute its access log."""
    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)

    access_logger = logging.getLogger(_ACCESS_LOGGER)
    access_logger.handlers.clear()
    access_logger.propagate = False
    access_logger.disabled = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and uvicorn's loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to also write logs to, opened in append mode.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    if not _installed(root, CONSOLE_HANDLER):
        _add_handler(root, logging.StreamHandler(), CONSOLE_HANDLER)
    if logfile and not _installed(root, FILE_HANDLER):
        _add_handler(root, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"), FILE_HANDLER)

    route_server_loggers(numeric_level)
