"""Tests for the compiled-expression cache."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from fnexpr.core.cache import ExpressionCache
from fnexpr.exceptions import CompilationError, InvalidArgumentError

from ..conftest import StubEngine


def test_get_on_empty_cache_returns_none(cache: ExpressionCache) -> None:
    assert cache.get("#target") is None
    assert len(cache) == 0


def test_put_then_get(cache: ExpressionCache) -> None:
    cache.put("#target", "compiled-a")

    assert cache.get("#target") == "compiled-a"
    assert "#target" in cache


def test_put_overwrites_existing_entry(cache: ExpressionCache) -> None:
    cache.put("#target", "compiled-a")
    cache.put("#target", "compiled-b")

    assert cache.get("#target") == "compiled-b"
    assert len(cache) == 1


def test_get_does_not_touch_counters(cache: ExpressionCache) -> None:
    cache.put("#target", "compiled")
    cache.get("#target")
    cache.get("missing")

    stats = cache.stats
    assert stats.hits == 0
    assert stats.misses == 0


def test_get_or_compile_compiles_once(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    """Repeated lookups of one source reach the engine only once."""
    first = cache.get_or_compile("#target + 1", stub_engine)
    second = cache.get_or_compile("#target + 1", stub_engine)
    third = cache.get_or_compile("#target + 1", stub_engine)

    assert stub_engine.compile_calls == ["#target + 1"]
    assert first is second is third
    stats = cache.stats
    assert (stats.hits, stats.misses, stats.compilations, stats.size) == (2, 1, 1, 1)


def test_distinct_sources_get_distinct_entries(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    cache.get_or_compile("#target", stub_engine)
    cache.get_or_compile("#target ", stub_engine)

    assert len(cache) == 2
    assert stub_engine.compile_calls == ["#target", "#target "]


def test_compile_failure_raises_and_caches_nothing(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    with pytest.raises(CompilationError, match="bad syntax") as exc_info:
        cache.get_or_compile("!broken", stub_engine)

    assert exc_info.value.source == "!broken"
    assert exc_info.value.diagnostic == "bad syntax"
    assert "!broken" not in cache
    assert cache.stats.compilations == 0


def test_compile_failure_is_not_remembered(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    """A failed source is recompiled, and fails again, on the next request."""
    for _ in range(2):
        with pytest.raises(CompilationError):
            cache.get_or_compile("!broken", stub_engine)

    assert stub_engine.compile_calls == ["!broken", "!broken"]


def test_compile_failure_leaves_other_entries_intact(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    good = cache.get_or_compile("#target", stub_engine)
    with pytest.raises(CompilationError):
        cache.get_or_compile("!broken", stub_engine)

    assert cache.get("#target") is good


def test_bounded_cache_evicts_least_recently_used(stub_engine: StubEngine) -> None:
    cache = ExpressionCache(max_entries=2)
    cache.get_or_compile("a", stub_engine)
    cache.get_or_compile("b", stub_engine)
    cache.get_or_compile("a", stub_engine)
    cache.get_or_compile("c", stub_engine)

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache
    assert cache.stats.evictions == 1


def test_eviction_does_not_invalidate_held_references(stub_engine: StubEngine) -> None:
    cache = ExpressionCache(max_entries=1)
    held = cache.get_or_compile("a", stub_engine)
    cache.get_or_compile("b", stub_engine)

    assert "a" not in cache
    assert held == ("compiled", "a")


@pytest.mark.parametrize("max_entries", [0, -1, True, 1.5])
def test_invalid_max_entries_rejected(max_entries: object) -> None:
    with pytest.raises(InvalidArgumentError, match="max_entries"):
        ExpressionCache(max_entries=max_entries)  # type: ignore[arg-type]


def test_clear_drops_entries(cache: ExpressionCache, stub_engine: StubEngine) -> None:
    cache.get_or_compile("a", stub_engine)
    cache.clear()

    assert len(cache) == 0
    cache.get_or_compile("a", stub_engine)
    assert stub_engine.compile_calls == ["a", "a"]


class NoneArtifactEngine(StubEngine):
    """Stub whose compiled form is ``None``."""

    name = "none-artifact"

    def compile(self, source: str) -> None:
        self.compile_calls.append(source)
        return None


def test_none_artifact_is_cached() -> None:
    cache = ExpressionCache()
    engine = NoneArtifactEngine()

    for _ in range(3):
        assert cache.get_or_compile("#target", engine) is None

    assert engine.compile_calls == ["#target"]
    assert "#target" in cache
    stats = cache.stats
    assert (stats.hits, stats.misses, stats.compilations) == (2, 1, 1)


class SlowEngine(StubEngine):
    """Stub whose compile step widens the first-use race window."""

    name = "slow"

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def compile(self, source: str) -> tuple[str, str]:
        time.sleep(0.01)
        with self._lock:
            self.compile_calls.append(source)
        return ("compiled", source)


def test_concurrent_first_use_yields_equivalent_entries(cache: ExpressionCache) -> None:
    """Racing threads may compile twice but always see an equivalent artefact."""
    engine = SlowEngine()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: cache.get_or_compile("#target", engine), range(64)))

    assert all(result == ("compiled", "#target") for result in results)
    assert len(cache) == 1
    assert 1 <= len(engine.compile_calls) <= 8
    assert cache.stats.hits + cache.stats.misses == 64
