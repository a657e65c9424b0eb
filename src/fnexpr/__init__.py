"""fnexpr: typed, cached evaluation of OGNL-style expressions.

Typical use::

    from fnexpr import INTEGER, eval_for

    add = eval_for(INTEGER, "#target + #param[0]", 10)
    add(5)  # 15
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from fnexpr.core import (
    CacheStats,
    EvaluationContext,
    EvaluatorFactory,
    ExpressionCache,
    TypedEvaluator,
    default_factory,
    eval_for,
    eval_for_object,
)
from fnexpr.engine import CompiledExpression, ExpressionEngine, OgnlEngine
from fnexpr.exceptions import (
    CompilationError,
    EvaluationError,
    FnexprError,
    InvalidArgumentError,
    TypeMismatchError,
)
from fnexpr.types.result import (
    ANY,
    BOOLEAN,
    FLOAT,
    INTEGER,
    OBJECT,
    STRING,
    ResultType,
    list_of,
    of,
    set_of,
    tuple_of,
)

__all__ = [
    "ANY",
    "BOOLEAN",
    "FLOAT",
    "INTEGER",
    "OBJECT",
    "STRING",
    "CacheStats",
    "CompilationError",
    "CompiledExpression",
    "EvaluationContext",
    "EvaluationError",
    "EvaluatorFactory",
    "ExpressionCache",
    "ExpressionEngine",
    "FnexprError",
    "InvalidArgumentError",
    "OgnlEngine",
    "ResultType",
    "TypeMismatchError",
    "TypedEvaluator",
    "__version__",
    "default_factory",
    "eval_for",
    "eval_for_object",
    "list_of",
    "of",
    "set_of",
    "tuple_of",
]

try:
    __version__ = version("fnexpr")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
