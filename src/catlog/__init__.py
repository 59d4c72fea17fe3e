"""catlog: a small category-filtered logger.

Expose a single source of truth for the version. Prefer reading from
importlib.metadata so that an editable install or wheel always reports
the version declared in pyproject.toml, falling back to a hardcoded string
when metadata is unavailable (direct source usage without installation).
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .api import (
    get_dispatcher,
    log_debug,
    log_error,
    log_info,
    log_success,
    set_dispatcher,
    set_enabled_categories,
    set_sink,
)
from .categories import Category, CategoryFilter, Sink
from .config import DispatcherConfig
from .dispatcher import LogDispatcher

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
	__version__ = _metadata.version("catlog")  # type: ignore[assignment]
except _metadata.PackageNotFoundError:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION

__all__ = [
    "__version__",
    "Category",
    "CategoryFilter",
    "DispatcherConfig",
    "LogDispatcher",
    "Sink",
    "get_dispatcher",
    "set_dispatcher",
    "set_sink",
    "set_enabled_categories",
    "log_info",
    "log_debug",
    "log_error",
    "log_success",
]
