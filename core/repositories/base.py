# =============================================================================
# core/repositories/base.py - Repository Interface
# =============================================================================
# Services talk to this interface only, so a database-backed implementation
# can replace the in-memory one without touching routes or services.
# =============================================================================

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Append-only collection of records.

    There is deliberately no update or delete: stored records are immutable
    for the lifetime of the process.
    """

    @abstractmethod
    def append(self, record: T) -> T:
        """Store a record and return it."""

    @abstractmethod
    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first stored record matching `predicate`, or None."""

    @abstractmethod
    def list(self, limit: int | None = None) -> list[T]:
        """
        Return records in insertion order.

        With `limit`, only the newest `limit` records are returned (still
        oldest first).
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
