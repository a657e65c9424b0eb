"""Process-shareable cache of compiled expressions keyed by source text."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fnexpr.exceptions import CompilationError, InvalidArgumentError

if TYPE_CHECKING:
    from fnexpr.engine.base import ExpressionEngine

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache counters."""

    hits: int
    misses: int
    compilations: int
    evictions: int
    size: int


class ExpressionCache:
    """Maps expression source text to its compiled form.

    Each distinct source is compiled at most once under sequential use.
    Compilation runs outside the lock, so two threads missing on the same new
    source may both compile it; the last write wins and either result is
    valid. With ``max_entries`` set, least recently used entries are dropped;
    evaluations already holding a compiled object are unaffected.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and (
            isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0
        ):
            raise InvalidArgumentError(f"max_entries must be a positive integer or None, got {max_entries!r}")
        self._max_entries = max_entries
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._compilations = 0
        self._evictions = 0

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, source: str) -> Any | None:
        """Return the compiled form of *source*, or None when absent."""
        with self._lock:
            return self._entries.get(source)

    def put(self, source: str, compiled: Any) -> None:
        """Store *compiled* under *source*, replacing any previous entry."""
        with self._lock:
            self._store(source, compiled)

    def get_or_compile(self, source: str, engine: ExpressionEngine) -> Any:
        """Return the cached compiled form of *source*, compiling it on a miss.

        Raises CompilationError when the engine rejects the source; nothing
        is cached in that case.
        """
        with self._lock:
            compiled = self._entries.get(source, _MISSING)
            if compiled is not _MISSING:
                self._hits += 1
                self._entries.move_to_end(source)
                return compiled
            self._misses += 1

        try:
            compiled = engine.compile(source)
        except CompilationError:
            raise
        except Exception as exc:
            raise CompilationError(source, str(exc)) from exc

        logger.debug("Compiled expression %r with %s engine", source, engine.name)
        with self._lock:
            self._compilations += 1
            self._store(source, compiled)
        return compiled

    def clear(self) -> None:
        """Drop every cached entry. Counters are kept."""
        with self._lock:
            self._entries.clear()

    @property
    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                compilations=self._compilations,
                evictions=self._evictions,
                size=len(self._entries),
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, source: object) -> bool:
        with self._lock:
            return source in self._entries

    def _store(self, source: str, compiled: Any) -> None:
        # Caller holds self._lock.
        self._entries[source] = compiled
        self._entries.move_to_end(source)
        if self._max_entries is None:
            return
        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            self._evictions += 1
            logger.debug("Evicted compiled expression %r", evicted)
