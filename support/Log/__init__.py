from __future__ import annotations

from .Logger import ContextFormatter, SupportLogger, LogContext, get_logger

__all__ = [
    'ContextFormatter',
    'SupportLogger',
    'LogContext',
    'get_logger',
]
