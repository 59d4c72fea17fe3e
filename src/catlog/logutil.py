"""Diagnostics channel for records the dispatcher drops.

catlog cannot report its own failures through itself without risking the
same failure again, so a dropped record (unopenable ``log.txt``, detached or
closed console stream, value whose ``__str__`` raises) is noted on the stdlib
``catlog`` logger instead. Those notes are DEBUG while the logger defaults to
WARNING: instrumented code sees nothing unless it opts in with
``logging.getLogger("catlog").setLevel(logging.DEBUG)``.
"""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None

DEFAULT_LEVEL = logging.WARNING


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("catlog")
        # Leave an application-installed handler alone.
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
            logger.addHandler(handler)
        # A level chosen before first use (the documented opt-in) wins over ours.
        if logger.level == logging.NOTSET:
            logger.setLevel(DEFAULT_LEVEL)
        _LOGGER = logger
    return _LOGGER

__all__ = ["get_logger", "DEFAULT_LEVEL"]
