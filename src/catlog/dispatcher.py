"""Category-filtered log dispatcher.

A dispatcher owns the active sink and the enabled-category filter and turns
each emission call into one newline-terminated record. Emission never raises:
suppressed categories, a ``NONE`` sink and unavailable outputs all end in no
I/O. Problems are reported at DEBUG on the internal ``catlog`` logger only.
"""
from __future__ import annotations

import threading
from datetime import datetime
from typing import Any, Callable, Iterable, List, Optional, Union

from .categories import Category, CategoryFilter, CategoryLike, Sink
from .config import DispatcherConfig
from .logutil import get_logger
from .render import colored_tag, format_timestamp, plain_tag, render_items, utc_now
from .sinks import ConsoleSink, FileSink, NullSink, RecordSink


class LogDispatcher:
    def __init__(
        self,
        sink: Union[Sink, str] = Sink.CONSOLE,
        categories: Optional[Iterable[CategoryLike]] = None,
        cfg: Optional[DispatcherConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.cfg = cfg or DispatcherConfig()
        self._clock = clock or utc_now
        self._sink = Sink.parse(sink)
        self._filter = (
            CategoryFilter.everything() if categories is None else CategoryFilter.from_categories(categories)
        )
        self._sinks = {
            Sink.NONE: NullSink(),
            Sink.CONSOLE: ConsoleSink(),
            Sink.FILE: FileSink(self.cfg.log_file, encoding=self.cfg.encoding),
        }
        # Guards the two state fields and serialises each render+write; re-entrant
        # so a value whose __str__ logs does not deadlock
        self._lock = threading.RLock()

    # --- configuration ------------------------------------------------------

    @property
    def sink(self) -> Sink:
        with self._lock:
            return self._sink

    @property
    def enabled(self) -> CategoryFilter:
        with self._lock:
            return self._filter

    def set_sink(self, sink: Union[Sink, str]) -> None:
        parsed = Sink.parse(sink)
        with self._lock:
            self._sink = parsed

    def set_enabled_categories(self, *categories: Union[CategoryLike, Iterable[CategoryLike]]) -> None:
        """Replace the enabled set wholesale.

        Accepts either one iterable (``set_enabled_categories([Category.INFO])``)
        or the categories as separate arguments. ``Category.ALL`` anywhere
        enables everything; no arguments (or an empty iterable) disables all
        output.
        """
        if len(categories) == 1 and not isinstance(categories[0], (Category, str)):
            flat: Iterable[CategoryLike] = categories[0]  # type: ignore[assignment]
        else:
            flat = categories  # type: ignore[assignment]
        new_filter = CategoryFilter.from_categories(flat)
        with self._lock:
            self._filter = new_filter

    # --- emission -----------------------------------------------------------

    def info(self, *values: Any) -> None:
        self._emit(Category.INFO, lambda sink: list(values))

    def debug(self, function_name: str, *values: Any) -> None:
        sep = self.cfg.field_separator

        def items(sink: RecordSink) -> List[Any]:
            return [*self._header(Category.DEBUG, sink), function_name, sep, *values]

        self._emit(Category.DEBUG, items)

    def error(self, file_name: str, function_name: str, line: int, *values: Any) -> None:
        sep = self.cfg.field_separator

        def items(sink: RecordSink) -> List[Any]:
            header = self._header(Category.ERROR, sink)
            if sink.timestamped:
                # File records carry the line but not the source file name
                return [*header, line, sep, function_name, sep, *values]
            return [*header, file_name, sep, line, sep, function_name, sep, *values]

        self._emit(Category.ERROR, items)

    def success(self, function_name: str) -> None:
        self._emit(Category.SUCCESS, lambda sink: [*self._header(Category.SUCCESS, sink), function_name])

    # --- internals ----------------------------------------------------------

    def _header(self, category: Category, sink: RecordSink) -> List[str]:
        if sink.timestamped:
            return [format_timestamp(self._clock(), self.cfg), plain_tag(category)]
        return [colored_tag(category)]

    def _emit(self, category: Category, build: Callable[[RecordSink], List[Any]]) -> None:
        with self._lock:
            if not self._filter.allows(category) or self._sink is Sink.NONE:
                return
            sink = self._sinks[self._sink]
            try:
                record = render_items(build(sink), self.cfg)
            except Exception as exc:  # noqa: BLE001 - a bad __str__ must not reach the caller
                get_logger().debug("dropping %s record: render failed: %s", category.name, exc)
                return
            try:
                sink.write(record, category)
            except Exception as exc:  # noqa: BLE001 - closed, binary or otherwise broken streams
                get_logger().debug("dropping %s record: %s sink unavailable: %s", category.name, self._sink.name, exc)


__all__ = ["LogDispatcher"]
