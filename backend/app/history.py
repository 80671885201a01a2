"""
MathPanel — in-memory solve history.

Entries live only as long as the server process; newest first, capped at
``HISTORY_LIMIT``.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class HistoryEntry:
    equation: str
    result: str
    steps: tuple[str, ...]
    timestamp: datetime = field(default_factory=datetime.now)


class HistoryStore:
    """Most-recent-first list of solved equations."""

    def __init__(self, limit: int = 100) -> None:
        self._limit = limit
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    def add(self, equation: str, result: str, steps) -> HistoryEntry:
        """Prepend a solve record and drop the oldest beyond the limit."""
        entry = HistoryEntry(equation=equation, result=result, steps=tuple(steps))
        with self._lock:
            self._entries.insert(0, entry)  # newest first
            del self._entries[self._limit:]
        return entry

    def list(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def get(self, index: int) -> Optional[HistoryEntry]:
        with self._lock:
            if 0 <= index < len(self._entries):
                return self._entries[index]
        return None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
