"""
Package logger for geoprojections.

Records go to a single stream handler at WARNING. Solver and registry
diagnostics are emitted at DEBUG; enable them with
`LOGGER.setLevel(logging.DEBUG)`.
"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geoprojections')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning on the package logger, unless the same text was already logged"""
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
