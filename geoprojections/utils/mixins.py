"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives instances a logger named after their module and class, e.g.
    'geoprojections.conic.AlbersEqualArea'. Those loggers are children of the
    package logger, so they share its level and handler.
    """
    logger: logging.Logger

    WARNED_ONCE: Set[str] = set()

    def __init__(self, logstr: Optional[str] = None):
        cls = self.__class__
        name = cls.__name__ if not logstr else f'{cls.__name__}.{logstr}'
        if cls.__module__ != 'builtins':
            name = f'{cls.__module__}.{name}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message, across all instances"""
        if msg in LoggingMixin.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        LoggingMixin.WARNED_ONCE.add(msg)
