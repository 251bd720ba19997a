# =============================================================================
# lib/ids.py - Record Identifiers
# =============================================================================
# Integer ids derived from the wall clock (milliseconds since epoch), forced
# to be strictly increasing so two records created in the same millisecond
# never share an id.
# =============================================================================

import time
from typing import Callable


class MonotonicIdGenerator:
    """
    Hands out time-derived, strictly increasing integer ids.

    Example:
        ids = MonotonicIdGenerator()
        ids.next_id()  # 1718000000000
        ids.next_id()  # 1718000000001 (same millisecond)
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last
