"""Record rendering.

Every item is turned into text with ``str()`` and followed by a single
separator; the record closes with one terminator. The trailing separator
before the newline is part of the on-disk format and must be kept.
"""
from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Iterable, Optional

from rich.color import ColorSystem
from rich.style import Style

from .categories import Category
from .config import TAG_COLORS, TAGS, DispatcherConfig

_DEFAULT_CONFIG = DispatcherConfig()


def render_items(items: Iterable[Any], cfg: Optional[DispatcherConfig] = None) -> str:
    cfg = cfg or _DEFAULT_CONFIG
    return "".join(f"{item}{cfg.separator}" for item in items) + cfg.terminator


def plain_tag(category: Category) -> str:
    return TAGS[category.name]


@lru_cache(maxsize=None)
def colored_tag(category: Category) -> str:
    # STANDARD keeps named colors as plain SGR 30-37 codes: "\x1b[33m...\x1b[0m"
    style = Style(color=TAG_COLORS[category.name])
    return style.render(plain_tag(category), color_system=ColorSystem.STANDARD)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime, cfg: Optional[DispatcherConfig] = None) -> str:
    cfg = cfg or _DEFAULT_CONFIG
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(cfg.timestamp_format)


__all__ = ["render_items", "plain_tag", "colored_tag", "utc_now", "format_timestamp"]
