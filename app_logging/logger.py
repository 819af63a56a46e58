"""
Logging setup for the bot: readable console output, optional JSON log files.
"""

import logging
import json
import sys
from datetime import datetime
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any

from config import LoggingConfig, LOGS_DIR


MAIN_LOGGER_NAME = "drink_session_bot"

# Third-party loggers that are too chatty at INFO (httpx logs every getUpdates poll)
QUIET_LOGGERS = ("httpx", "httpcore")


class StructuredFormatter(logging.Formatter):
    """One JSON object per line, for the rotating log files."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, 'extra_data'):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ReadableFormatter(logging.Formatter):
    """Console format."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def _level() -> int:
    return getattr(logging, LoggingConfig.LOG_LEVEL, logging.INFO)


def configure_console(stream=None) -> logging.Handler:
    """
    Attach a single readable console handler to the root logger.

    Every app logger propagates here, so a record is printed exactly once.
    Calling it again replaces the previous console handler.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_drink_console", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ReadableFormatter())
    handler._drink_console = True
    root.addHandler(handler)
    root.setLevel(_level())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def setup_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Set up an app logger, adding a JSON rotating file handler when
    LOG_TO_FILE is on. Console output comes from the root handler.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_level())

    if logger.handlers or not (log_file and LoggingConfig.LOG_TO_FILE):
        return logger

    LOGS_DIR.mkdir(exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LoggingConfig.MAX_LOG_SIZE,
        backupCount=LoggingConfig.BACKUP_COUNT
    )
    file_handler.setFormatter(StructuredFormatter())
    logger.addHandler(file_handler)
    return logger


def log_with_data(logger: logging.Logger, level: int, message: str,
                  data: Dict[str, Any] = None):
    """Log a message with a structured payload attached as ``extra_data``."""
    if not logger.isEnabledFor(level):
        return

    record = logger.makeRecord(logger.name, level, "(unknown file)", 0, message, (), None)
    if data:
        record.extra_data = data
    logger.handle(record)


_loggers: Dict[str, logging.Logger] = {}


def _named_logger(suffix: str, log_file: Path) -> logging.Logger:
    name = f"{MAIN_LOGGER_NAME}.{suffix}" if suffix else MAIN_LOGGER_NAME
    if name not in _loggers:
        _loggers[name] = setup_logger(name, log_file)
    return _loggers[name]


def get_main_logger() -> logging.Logger:
    return _named_logger("", LoggingConfig.APP_LOG)


def get_operations_logger() -> logging.Logger:
    """Per-command start/complete/failure events."""
    return _named_logger("operations", LoggingConfig.OPERATIONS_LOG)


def get_errors_logger() -> logging.Logger:
    """Exceptions raised while polling or answering updates."""
    return _named_logger("errors", LoggingConfig.ERRORS_LOG)


def configure_all_loggers():
    """Configure the console handler and all application loggers."""
    configure_console()
    get_main_logger()
    get_operations_logger()
    get_errors_logger()
