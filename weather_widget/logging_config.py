"""Logging setup for the widget server.

Every record goes to a rotating JSON file so search failures can be traced
after the fact; the console gets a short line per record at the configured
level. Fields passed to ``log_with_context`` (``event_type``, ``widget_id``,
``status_code``...) end up as top-level keys in the JSON output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "weather_widget.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5
DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"

JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers that are chatty at INFO and add nothing the hooks don't already log.
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _json_file_handler(log_dir: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(jsonlogger.JsonFormatter(JSON_FIELDS, timestamp=True))
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the file and console handlers on the root logger.

    Calling this again replaces the handlers rather than stacking them.

    Args:
        log_level: Console threshold name, e.g. ``"DEBUG"`` or ``"WARNING"``
        log_dir: Where the JSON log lives; created if missing

    Returns:
        The root logger
    """
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(log_dir))
    root_logger.addHandler(_console_handler(level))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **fields: Any,
) -> None:
    """Emit ``message`` at ``level`` with ``fields`` attached to the record.

    The widget only ever shows its two canned error messages; the provider
    status, the failing location and the exception type go here instead.
    """
    getattr(logger, level.lower())(message, extra=fields)
