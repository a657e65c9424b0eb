"""Tests for evaluator factories and the module-level helpers."""

from __future__ import annotations

import fnexpr
from fnexpr.core import factory as factory_module
from fnexpr.core.cache import ExpressionCache
from fnexpr.core.factory import EvaluatorFactory, default_factory, eval_for, eval_for_object
from fnexpr.engine.ognl import OgnlEngine
from fnexpr.types.result import ANY, INTEGER, STRING


def test_default_factory_is_shared() -> None:
    assert default_factory() is default_factory()
    assert isinstance(default_factory().engine, OgnlEngine)


def test_module_level_eval_for_uses_default_cache() -> None:
    evaluator = eval_for(INTEGER, "#target * 3 + 0")

    assert evaluator.evaluate(4, 0) == 12
    assert evaluator.cache is default_factory().cache
    assert "#target * 3 + 0" in default_factory().cache


def test_module_level_eval_for_object() -> None:
    evaluator = eval_for_object("#target.{#this + #param[0]}", 1)

    assert evaluator.result_type is ANY
    assert evaluator.parameters == (1,)
    assert evaluator.evaluate([1, 2]) == [2, 3]


def test_package_reexports_helpers() -> None:
    assert fnexpr.eval_for is factory_module.eval_for
    assert fnexpr.eval_for(STRING, "'a' + #index").evaluate(None, 1) == "a1"


def test_factories_with_separate_caches_are_isolated() -> None:
    first = EvaluatorFactory(cache=ExpressionCache())
    second = EvaluatorFactory(cache=ExpressionCache())

    first.eval_for(INTEGER, "#target").evaluate(1)

    assert len(first.cache) == 1
    assert len(second.cache) == 0


def test_factory_defaults() -> None:
    factory = EvaluatorFactory()

    assert isinstance(factory.engine, OgnlEngine)
    assert factory.cache.max_entries is None


def test_evaluators_share_factory_engine_and_cache(factory: EvaluatorFactory) -> None:
    one = factory.eval_for(INTEGER, "#target")
    two = factory.eval_for_object("#target")

    assert one.engine is two.engine is factory.engine
    assert one.cache is two.cache is factory.cache


def test_equal_evaluators_compare_by_definition(factory: EvaluatorFactory) -> None:
    assert factory.eval_for(INTEGER, "#target", 1) == EvaluatorFactory().eval_for(INTEGER, "#target", 1)
    assert factory.eval_for(INTEGER, "#target", 1) != factory.eval_for(INTEGER, "#target", 2)
