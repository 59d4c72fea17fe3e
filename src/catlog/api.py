"""Process-wide default dispatcher and call-site capturing helpers.

``log_debug``, ``log_error`` and ``log_success`` fill in the calling function
name (and for errors the source file basename and line) from the caller's
frame, so instrumented code only passes the message values::

    from catlog import log_error

    def load(path):
        ...
        log_error("cannot parse", path)   # -> [ERROR]: loader.py : 12 : load : cannot parse ...
"""
from __future__ import annotations

import os
import sys
import threading
from typing import Any, Iterable, Optional, Tuple, Union

from .categories import CategoryLike, Sink
from .dispatcher import LogDispatcher

_DISPATCHER: Optional[LogDispatcher] = None
_DISPATCHER_LOCK = threading.Lock()


def get_dispatcher() -> LogDispatcher:
    global _DISPATCHER
    if _DISPATCHER is None:
        with _DISPATCHER_LOCK:
            if _DISPATCHER is None:
                _DISPATCHER = LogDispatcher()
    return _DISPATCHER


def set_dispatcher(dispatcher: Optional[LogDispatcher]) -> Optional[LogDispatcher]:
    """Install ``dispatcher`` as the process default and return the previous one.

    Passing ``None`` resets to a lazily built default (console sink, all
    categories) on next use.
    """
    global _DISPATCHER
    with _DISPATCHER_LOCK:
        previous, _DISPATCHER = _DISPATCHER, dispatcher
    return previous


def set_sink(sink: Union[Sink, str]) -> None:
    get_dispatcher().set_sink(sink)


def set_enabled_categories(*categories: Union[CategoryLike, Iterable[CategoryLike]]) -> None:
    get_dispatcher().set_enabled_categories(*categories)


def _caller(depth: int = 2) -> Tuple[str, str, int]:
    # depth 2: skip _caller itself and the public helper that called it
    frame = sys._getframe(depth)
    code = frame.f_code
    return os.path.basename(code.co_filename), code.co_name, frame.f_lineno


def log_info(*values: Any) -> None:
    get_dispatcher().info(*values)


def log_debug(*values: Any) -> None:
    _, function_name, _ = _caller()
    get_dispatcher().debug(function_name, *values)


def log_error(*values: Any) -> None:
    file_name, function_name, line = _caller()
    get_dispatcher().error(file_name, function_name, line, *values)


def log_success() -> None:
    _, function_name, _ = _caller()
    get_dispatcher().success(function_name)


__all__ = [
    "get_dispatcher",
    "set_dispatcher",
    "set_sink",
    "set_enabled_categories",
    "log_info",
    "log_debug",
    "log_error",
    "log_success",
]
