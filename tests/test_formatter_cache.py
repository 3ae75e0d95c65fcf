"""Tests for FormatterCache: construction counting, LRU bound, metrics.

Python 3.13+.
"""

import threading

import pytest

from intlformat.runtime import FormatterCache


class TestGetOrCreate:
    def test_builds_once_per_key(self) -> None:
        cache: FormatterCache[object] = FormatterCache()
        calls: list[str] = []

        def factory() -> object:
            calls.append("built")
            return object()

        first = cache.get_or_create("k", factory)
        second = cache.get_or_create("k", factory)
        assert first is second
        assert calls == ["built"]
        assert cache.constructions == 1
        assert cache.hits == 1
        assert cache.misses == 1

    def test_distinct_keys(self) -> None:
        cache: FormatterCache[str] = FormatterCache()
        assert cache.get_or_create("a", lambda: "A") == "A"
        assert cache.get_or_create("b", lambda: "B") == "B"
        assert len(cache) == 2
        assert "a" in cache
        assert "c" not in cache

    def test_factory_error_not_cached(self) -> None:
        cache: FormatterCache[str] = FormatterCache()

        def failing() -> str:
            msg = "no data"
            raise ValueError(msg)

        with pytest.raises(ValueError, match="no data"):
            cache.get_or_create("k", failing)
        assert "k" not in cache
        assert cache.misses == 1
        assert cache.constructions == 0

    def test_concurrent_callers_share_instance(self) -> None:
        cache: FormatterCache[object] = FormatterCache()
        barrier = threading.Barrier(8)
        results: list[object] = []

        def worker() -> None:
            barrier.wait()
            results.append(cache.get_or_create("shared", object))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert cache.constructions == 1
        assert all(result is results[0] for result in results)


class TestBound:
    def test_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError, match="maxsize must be positive"):
            FormatterCache(0)

    def test_lru_eviction(self) -> None:
        cache: FormatterCache[str] = FormatterCache(2)
        cache.get_or_create("a", lambda: "A")
        cache.get_or_create("b", lambda: "B")
        cache.get_or_create("a", lambda: "A2")  # refresh a
        cache.get_or_create("c", lambda: "C")  # evicts b
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache


class TestStats:
    def test_initial(self) -> None:
        assert FormatterCache().get_stats() == {
            "size": 0,
            "maxsize": None,
            "hits": 0,
            "misses": 0,
            "constructions": 0,
            "hit_rate": 0.0,
        }

    def test_hit_rate(self) -> None:
        cache: FormatterCache[str] = FormatterCache(10)
        for _ in range(4):
            cache.get_or_create("k", lambda: "v")
        stats = cache.get_stats()
        assert stats["hit_rate"] == 75.0
        assert stats["maxsize"] == 10

    def test_clear_resets(self) -> None:
        cache: FormatterCache[str] = FormatterCache()
        cache.get_or_create("k", lambda: "v")
        cache.clear()
        assert len(cache) == 0
        assert cache.get_stats()["misses"] == 0
        assert cache.constructions == 0
