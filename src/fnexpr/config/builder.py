"""Build evaluators from loaded configuration."""

from __future__ import annotations

from fnexpr.config.model import FnexprConfig
from fnexpr.core.cache import ExpressionCache
from fnexpr.core.evaluator import TypedEvaluator
from fnexpr.core.factory import EvaluatorFactory
from fnexpr.exceptions import CompilationError


def build_factory(config: FnexprConfig) -> EvaluatorFactory:
    """Return a factory whose cache honours the configured size bound."""
    return EvaluatorFactory(cache=ExpressionCache(max_entries=config.cache_max_entries))


def build_evaluators(config: FnexprConfig, factory: EvaluatorFactory | None = None) -> dict[str, TypedEvaluator]:
    """Return one evaluator per configured expression, keyed by name."""
    if factory is None:
        factory = build_factory(config)
    return {
        definition.name: factory.eval_for(definition.result_type, definition.source, *definition.parameters)
        for definition in config.expressions
    }


def validate_config(config: FnexprConfig, factory: EvaluatorFactory | None = None) -> list[str]:
    """Compile every configured expression and return error messages in name order.

    Returns an empty list when every expression compiles.
    """
    if factory is None:
        factory = build_factory(config)
    errors: list[str] = []
    for definition in sorted(config.expressions, key=lambda d: d.name):
        try:
            factory.cache.get_or_compile(definition.source, factory.engine)
        except CompilationError as exc:
            errors.append(f"[{definition.name}] {exc}")
    return errors
