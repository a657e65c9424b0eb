"""Typed, cached expression evaluation core."""

from __future__ import annotations

from .context import EvaluationContext
from .cache import CacheStats, ExpressionCache
from .evaluator import TypedEvaluator
from .factory import EvaluatorFactory, default_factory, eval_for, eval_for_object
from .verification import verify_result

__all__ = [
    "CacheStats",
    "EvaluationContext",
    "EvaluatorFactory",
    "ExpressionCache",
    "TypedEvaluator",
    "default_factory",
    "eval_for",
    "eval_for_object",
    "verify_result",
]
