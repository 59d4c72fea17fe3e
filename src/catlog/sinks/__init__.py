"""Record sink abstractions.

A sink receives one fully rendered record at a time. Sinks hold no open
resources between writes: the console sink looks its stream up on every
write and the file sink opens, appends and closes per record. ``timestamped``
selects the file layout (UTC stamp plus plain tag) over the colored console
one. Whatever a write raises is dropped by the dispatcher.
"""
from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from ..categories import Category


class RecordSink(Protocol):  # pragma: no cover - simple protocol
    timestamped: bool

    def write(self, record: str, category: Category) -> None: ...  # noqa: E701 - protocol stub


class NullSink:
    timestamped = False

    def write(self, record: str, category: Category) -> None:
        return None


class ConsoleSink:
    timestamped = False

    def stream_for(self, category: Category) -> Optional[TextIO]:
        # Resolved per call so redirected/captured streams are honoured
        return sys.stderr if category is Category.ERROR else sys.stdout

    def write(self, record: str, category: Category) -> None:
        stream = self.stream_for(category)
        if stream is None:
            # Detached console (pythonw, daemonised process)
            return
        stream.write(record)
        stream.flush()


class FileSink:
    timestamped = True

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding

    def write(self, record: str, category: Category) -> None:
        # Encode first so an unencodable record never touches the file
        data = record.encode(self.encoding)
        with open(self.path, "ab") as fh:
            fh.write(data)


__all__ = ["RecordSink", "NullSink", "ConsoleSink", "FileSink"]
