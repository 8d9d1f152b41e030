"""Operational utilities for the localizer package."""

from __future__ import annotations

import json
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Deque, Optional

DEFAULT_CAPACITY = 1000


class StructuredLogger:
    """Keep a bounded window of locale events, optionally mirrored to a JSON lines file.

    Only the newest ``capacity`` entries stay in memory; the file sink, when
    configured, receives every entry.
    """

    def __init__(self, *, path: Path | None = None, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero.")
        self.path = path
        self._entries: Deque[dict] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def log(self, event_type: str, **fields: object) -> dict:
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), "event": event_type, **fields}
        self._entries.append(entry)
        if self.path:
            self._write(self.path, entry)
        return entry

    def tail(self, limit: int = 50) -> tuple[dict, ...]:
        if limit <= 0:
            return ()
        return tuple(self._entries)[-limit:]

    def events(self, event_type: Optional[str] = None) -> tuple[dict, ...]:
        """Return the retained entries, optionally only those of ``event_type``."""

        if event_type is None:
            return tuple(self._entries)
        return tuple(entry for entry in self._entries if entry["event"] == event_type)

    def clear(self) -> None:
        self._entries.clear()

    @staticmethod
    def _write(path: Path, entry: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, default=str) + "\n")


__all__ = ["DEFAULT_CAPACITY", "StructuredLogger"]
