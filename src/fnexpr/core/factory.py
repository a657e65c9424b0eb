"""Factories that build typed evaluators over a shared engine and cache."""

from __future__ import annotations

import logging
from typing import Any

from fnexpr.core.cache import ExpressionCache
from fnexpr.core.evaluator import TypedEvaluator
from fnexpr.engine.base import ExpressionEngine
from fnexpr.engine.ognl import OgnlEngine
from fnexpr.types.result import ANY, ResultType

logger = logging.getLogger(__name__)


class EvaluatorFactory:
    """Owns one expression engine and one compiled-expression cache.

    Every evaluator built by a factory shares its cache, so identical
    expression text is compiled once no matter how many evaluators use it.
    Build a separate factory (or pass a separate cache) to isolate callers.
    """

    def __init__(self, engine: ExpressionEngine | None = None, cache: ExpressionCache | None = None) -> None:
        self.engine = engine if engine is not None else OgnlEngine()
        self.cache = cache if cache is not None else ExpressionCache()
        logger.debug("EvaluatorFactory initialized (engine=%s, max_entries=%s)", self.engine.name, self.cache.max_entries)

    def eval_for(self, result_type: ResultType, source: str, *params: Any) -> TypedEvaluator:
        """Return an evaluator for *source* whose results must be *result_type*.

        Inside the expression ``#target`` is the evaluated object (also the
        root for bare property names), ``#param`` the tuple of *params* and
        ``#index`` the iteration index, when there is one.
        """
        return TypedEvaluator(
            result_type=result_type,
            source=source,
            parameters=params,
            engine=self.engine,
            cache=self.cache,
        )

    def eval_for_object(self, source: str, *params: Any) -> TypedEvaluator:
        """Return an evaluator for *source* with an unconstrained result type."""
        return self.eval_for(ANY, source, *params)


_DEFAULT_FACTORY = EvaluatorFactory()


def default_factory() -> EvaluatorFactory:
    """Return the process-wide factory used by the module-level helpers."""
    return _DEFAULT_FACTORY


def eval_for(result_type: ResultType, source: str, *params: Any) -> TypedEvaluator:
    """Build an evaluator on the default factory. See :meth:`EvaluatorFactory.eval_for`."""
    return _DEFAULT_FACTORY.eval_for(result_type, source, *params)


def eval_for_object(source: str, *params: Any) -> TypedEvaluator:
    """Build an unconstrained evaluator on the default factory."""
    return _DEFAULT_FACTORY.eval_for_object(source, *params)
