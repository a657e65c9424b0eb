"""Shared pytest fixtures and engine doubles for fnexpr tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fnexpr.core.cache import ExpressionCache
from fnexpr.core.context import EvaluationContext
from fnexpr.core.factory import EvaluatorFactory
from fnexpr.engine.base import ExpressionEngine
from fnexpr.exceptions import EngineCompileError


class StubEngine(ExpressionEngine):
    """Engine double that records calls.

    Sources starting with ``!`` fail to compile. Evaluation delegates to
    *evaluate_fn*, which defaults to returning the target.
    """

    name = "stub"

    def __init__(self, evaluate_fn: Callable[[str, EvaluationContext], Any] | None = None) -> None:
        self.evaluate_fn = evaluate_fn or (lambda source, context: context.target)
        self.compile_calls: list[str] = []
        self.contexts: list[EvaluationContext] = []

    def compile(self, source: str) -> tuple[str, str]:
        self.compile_calls.append(source)
        if source.startswith("!"):
            raise EngineCompileError("bad syntax")
        return ("compiled", source)

    def evaluate(self, compiled: Any, context: EvaluationContext, root: Any) -> Any:
        self.contexts.append(context)
        return self.evaluate_fn(compiled[1], context)


@pytest.fixture
def cache() -> ExpressionCache:
    """Return an isolated, unbounded expression cache."""
    return ExpressionCache()


@pytest.fixture
def stub_engine() -> StubEngine:
    return StubEngine()


@pytest.fixture
def factory(cache: ExpressionCache) -> EvaluatorFactory:
    """Return a factory using the OGNL engine and an isolated cache."""
    return EvaluatorFactory(cache=cache)


@pytest.fixture
def stub_factory(stub_engine: StubEngine, cache: ExpressionCache) -> EvaluatorFactory:
    return EvaluatorFactory(engine=stub_engine, cache=cache)
