"""In-process log capture for the launcher's diagnostics view.

A handler attached to the root logger keeps the most recent records in a
ring buffer. The settings dialog shows them and "export logs" writes them
out as JSON Lines, which is how config load/save failures reach the user
when they are not looking at a console.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from dataclasses import asdict, dataclass
from pathlib import Path
from threading import RLock
from typing import Deque, List, Optional

from .service_locator import services

__all__ = ["LogEntry", "LoggingService", "get_logging_service"]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float
    pathname: str
    lineno: int


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(self, capacity: int = 500, level: int = logging.DEBUG) -> None:
        self._capacity = capacity
        self._lock = RLock()
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(level)
        self._attached = False

    # Lifecycle --------------------------------------------------------
    def attach_root(self) -> None:
        if self._attached:
            return
        root = logging.getLogger()
        root.addHandler(self._handler)
        if root.level > self._handler.level:
            root.setLevel(self._handler.level)
        self._attached = True

    def detach_root(self) -> None:
        if not self._attached:
            return
        logging.getLogger().removeHandler(self._handler)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def _ingest_record(self, record: logging.LogRecord) -> None:
        entry = LogEntry(
            level=record.levelname,
            name=record.name,
            message=record.getMessage(),
            created=record.created,
            pathname=record.pathname,
            lineno=record.lineno,
        )
        with self._lock:
            self._entries.append(entry)

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        with self._lock:
            data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def export_jsonl(
        self,
        path: Path | str,
        *,
        level: str | None = None,
        name_contains: str | None = None,
    ) -> int:
        """Write filtered entries as JSON Lines; returns the number written."""
        entries = self.filter(level=level, name_contains=name_contains)
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as fh:
            for e in entries:
                fh.write(json.dumps(asdict(e), sort_keys=True) + "\n")
        return len(entries)


def get_logging_service() -> LoggingService:
    return services.get_typed("logging_service", LoggingService)
