# =============================================================================
# tests/test_repositories.py - Repository and Id Tests
# =============================================================================

from lib.ids import MonotonicIdGenerator


class TestInMemoryRepository:
    """Tests for the append-only in-memory repository."""

    def test_append_returns_record(self, repository):
        assert repository.append("a") == "a"
        assert repository.count() == 1

    def test_list_keeps_insertion_order(self, repository):
        for item in ["a", "b", "c"]:
            repository.append(item)

        assert repository.list() == ["a", "b", "c"]

    def test_list_limit_returns_newest_oldest_first(self, repository):
        for i in range(7):
            repository.append(i)

        assert repository.list(limit=5) == [2, 3, 4, 5, 6]
        assert repository.list(limit=0) == []

    def test_list_is_a_copy(self, repository):
        repository.append("a")

        repository.list().append("b")

        assert repository.count() == 1

    def test_find_first_match(self, repository):
        for item in ["apple", "avocado", "banana"]:
            repository.append(item)

        assert repository.find(lambda s: s.startswith("a")) == "apple"
        assert repository.find(lambda s: s.startswith("z")) is None


class TestMonotonicIdGenerator:
    """Tests for time-derived ids."""

    def test_ids_are_milliseconds(self):
        ids = MonotonicIdGenerator(clock=lambda: 1700000000.5)

        assert ids.next_id() == 1700000000500

    def test_same_millisecond_still_increases(self):
        ids = MonotonicIdGenerator(clock=lambda: 1700000000.0)

        first, second, third = ids.next_id(), ids.next_id(), ids.next_id()

        assert first < second < third

    def test_clock_going_backwards_still_increases(self):
        times = iter([1700000001.0, 1700000000.0])
        ids = MonotonicIdGenerator(clock=lambda: next(times))

        first = ids.next_id()
        second = ids.next_id()

        assert second == first + 1
