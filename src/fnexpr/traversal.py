"""Indexed traversal helpers that apply an evaluator to each element.

These are the minimal consumers of the typed evaluator contract: the element
is passed as target together with its zero-based position.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeAlias

from fnexpr.types.common import Index

ElementFunction: TypeAlias = Callable[[Any, Index], Any]


def map_indexed(fn: ElementFunction, items: Iterable[Any]) -> list[Any]:
    """Apply *fn* to every item with its index, preserving order."""
    return [fn(item, index) for index, item in enumerate(items)]


def map_indexed_parallel(fn: ElementFunction, items: Iterable[Any], *, max_workers: int | None = None) -> list[Any]:
    """Like :func:`map_indexed`, running evaluations on a thread pool.

    Results keep input order. The first failure is re-raised.
    """
    indexed = list(enumerate(items))
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(fn, item, index) for index, item in indexed]
        return [future.result() for future in futures]


def all_match(fn: ElementFunction, items: Iterable[Any]) -> bool:
    """Return True when *fn* holds for every item."""
    return all(fn(item, index) for index, item in enumerate(items))


def any_match(fn: ElementFunction, items: Iterable[Any]) -> bool:
    """Return True when *fn* holds for at least one item."""
    return any(fn(item, index) for index, item in enumerate(items))
