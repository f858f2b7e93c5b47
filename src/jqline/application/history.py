"""
Bounded history of submitted queries with an up/down read cursor.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from jqline.logger import get_logger

logger = get_logger("history")

DEFAULT_CAPACITY = 512


class HistoryLedger:
    """
    Most-recent-first buffer of submitted queries.

    Index 0 is the newest entry. The read cursor is an index into the buffer
    (or None before the first push); recalling moves only the cursor, never the
    stored entries.

    Example:
        >>> ledger = HistoryLedger()
        >>> ledger.push(".a")
        >>> ledger.push(".b")
        >>> ledger.recall_older()
        '.a'
        >>> ledger.recall_newer()
        '.b'
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: deque[str] = deque()
        self._cursor: int | None = None

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int | None:
        """Index of the entry the read cursor references, or None."""
        return self._cursor

    @property
    def entries(self) -> tuple[str, ...]:
        """Snapshot of all entries, newest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def current(self) -> str | None:
        if self._cursor is None:
            return None
        return self._entries[self._cursor]

    def push(self, entry: str) -> None:
        """Record ``entry`` as the newest item and point the cursor at it."""
        self._entries.appendleft(entry)
        self._cursor = 0
        if len(self._entries) > self._capacity:
            evicted = self._entries.pop()
            logger.debug(f"History full ({self._capacity}), evicted oldest entry {evicted!r}")

    def recall_older(self) -> str | None:
        """Move the cursor one entry towards the oldest; stays put at the tail."""
        if self._cursor is None:
            return None
        if self._cursor + 1 < len(self._entries):
            self._cursor += 1
        return self._entries[self._cursor]

    def recall_newer(self) -> str | None:
        """Move the cursor one entry towards the newest; stays put at the head."""
        if self._cursor is None:
            return None
        if self._cursor > 0:
            self._cursor -= 1
        return self._entries[self._cursor]

    def has_older(self) -> bool:
        return self._cursor is not None and self._cursor + 1 < len(self._entries)

    def has_newer(self) -> bool:
        return self._cursor is not None and self._cursor > 0
