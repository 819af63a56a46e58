"""
Error logging with stack traces.
"""

import logging
import traceback
from datetime import datetime
from typing import Optional, Dict

from .logger import get_errors_logger, log_with_data


class ErrorLogger:
    """Logs errors raised while receiving or answering updates."""

    def __init__(self):
        self._logger = None

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            self._logger = get_errors_logger()
        return self._logger

    def log_exception(self, exception: BaseException, source: str = None,
                      context: Dict = None):
        """Log an exception with full stack trace."""
        error_type = type(exception).__name__
        error_message = str(exception)
        stack_trace = "".join(
            traceback.format_exception(type(exception), exception, exception.__traceback__)
        )

        data = {
            "event": "exception",
            "error_type": error_type,
            "error_message": error_message,
            "stack_trace": stack_trace,
            "source": source,
            "context": context,
            "timestamp": datetime.now().isoformat()
        }

        log_with_data(
            self.logger,
            logging.ERROR,
            f"Exception [{error_type}]: {error_message}",
            data
        )


# Global instance
_error_logger: Optional[ErrorLogger] = None


def get_error_logger() -> ErrorLogger:
    """Get or create error logger instance."""
    global _error_logger
    if _error_logger is None:
        _error_logger = ErrorLogger()
    return _error_logger
