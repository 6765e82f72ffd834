from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, Union

from support.Config import settings

LogContext = Dict[str, Union[str, int, float, bool, None]]


class ContextFormatter(logging.Formatter):
    """Formatter rendering a record's context as trailing key=value pairs."""

    def __init__(self) -> None:
        super().__init__('[%(asctime)s] %(levelname)s in %(name)s: %(message)s', datefmt='%Y-%m-%d %H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context: LogContext = getattr(record, 'context', None) or {}
        if not context:
            return line

        rendered = " | ".join(f"{key}={value}" for key, value in context.items())
        head, newline, trace = line.partition("\n")
        return f"{head} | {rendered}{newline}{trace}"


class SupportLogger:
    """Named logging channel taking a context dict with every message.

    The context travels on the record as ``record.context``, so handlers
    other than the stdout one (pytest's caplog, a JSON handler) can read
    it as structured data.
    """

    def __init__(self, name: str, level: Optional[str] = None) -> None:
        self.name = name
        self.logger = logging.getLogger(name)

        # One stdout handler per channel, however often it is requested
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(ContextFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(self._resolve_level(level or settings.LOG_LEVEL))

    @staticmethod
    def _resolve_level(level: Union[str, int]) -> int:
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.WARNING

    def log(self, level: Union[str, int], message: str, context: Optional[LogContext] = None) -> None:
        """Log a message at the given level."""
        self.logger.log(self._resolve_level(level), message, extra={'context': context or {}})

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.INFO, message, context)

    def warning(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.WARNING, message, context)

    def error(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.ERROR, message, context)

    def critical(self, message: str, context: Optional[LogContext] = None) -> None:
        self.log(logging.CRITICAL, message, context)


def get_logger(name: Optional[str] = None) -> SupportLogger:
    """Get the channel for ``name``, the package channel by default."""
    return SupportLogger(name or settings.LOG_NAME)
