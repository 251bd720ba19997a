# =============================================================================
# core/repositories/memory.py - In-Memory Repository
# =============================================================================

from typing import Callable

from .base import Repository, T


class InMemoryRepository(Repository[T]):
    """
    Repository backed by a Python list.

    Appends are plain synchronous list operations, so on a single event loop
    each one is atomic relative to other requests. Lookups are linear scans.
    """

    def __init__(self, name: str = "records"):
        self.name = name
        self._records: list[T] = []

    def append(self, record: T) -> T:
        self._records.append(record)
        return record

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        return next((record for record in self._records if predicate(record)), None)

    def list(self, limit: int | None = None) -> list[T]:
        if limit is None:
            return list(self._records)
        if limit <= 0:
            return []
        return self._records[-limit:]

    def count(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"InMemoryRepository(name={self.name!r}, count={len(self._records)})"
