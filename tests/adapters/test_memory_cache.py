"""Tests for the single-flight in-memory cache."""

import threading
import time

import pytest

from footprint.adapters.cache import InMemoryCache


def _wait_for_misses(cache, count, timeout=5.0):
    """Block until `count` callers have registered a miss."""
    deadline = time.monotonic() + timeout
    while cache.stats()["misses"] < count:
        assert time.monotonic() < deadline, "callers never reached the cache"
        time.sleep(0.01)


@pytest.fixture
def cache():
    return InMemoryCache(name="test")


def test_get_or_compute_caches_success(cache):
    calls = []

    def compute():
        calls.append(1)
        return "value"

    assert cache.get_or_compute("k", compute) == "value"
    assert cache.get_or_compute("k", compute) == "value"
    assert len(calls) == 1
    assert cache.stats()["computations"] == 1


def test_failures_are_not_cached(cache):
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return "ok"

    with pytest.raises(RuntimeError):
        cache.get_or_compute("k", flaky)
    assert not cache.contains("k")
    assert cache.get_or_compute("k", flaky) == "ok"
    assert len(attempts) == 2


def test_concurrent_callers_share_one_computation(cache):
    calls = []
    release = threading.Event()

    def slow():
        calls.append(1)
        release.wait(timeout=5)
        return object()

    results = []
    threads = [
        threading.Thread(target=lambda: results.append(cache.get_or_compute("k", slow)))
        for _ in range(10)
    ]
    for t in threads:
        t.start()
    _wait_for_misses(cache, len(threads))
    release.set()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 10
    assert all(r is results[0] for r in results)


def test_concurrent_callers_share_one_failure(cache):
    calls = []
    release = threading.Event()
    errors = []

    def failing():
        calls.append(1)
        release.wait(timeout=5)
        raise ValueError("shared failure")

    def worker():
        try:
            cache.get_or_compute("k", failing)
        except ValueError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(5)]
    for t in threads:
        t.start()
    _wait_for_misses(cache, len(threads))
    release.set()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(errors) == 5
    assert all(e is errors[0] for e in errors)


def test_set_get_clear(cache):
    cache.set("a", 1)
    assert cache.get("a") == 1
    assert cache.get("b") is None
    assert cache.size() == 1
    assert cache.clear() == 1
    assert cache.size() == 0
