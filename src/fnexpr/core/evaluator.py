"""Typed evaluator: cached compilation, context binding and result checks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fnexpr.core.cache import ExpressionCache
from fnexpr.core.context import EvaluationContext
from fnexpr.core.verification import verify_result
from fnexpr.exceptions import EvaluationError, InvalidArgumentError
from fnexpr.types.common import Index, Parameters
from fnexpr.types.result import ResultType

if TYPE_CHECKING:
    from fnexpr.engine.base import ExpressionEngine


@dataclass(frozen=True)
class TypedEvaluator:
    """An expression bound to a declared result type and fixed parameters.

    Instances are immutable and may be shared between threads and reused for
    any number of evaluations. Usually built through
    :class:`~fnexpr.core.factory.EvaluatorFactory` rather than directly.
    """

    result_type: ResultType
    source: str
    parameters: Parameters
    engine: ExpressionEngine = field(repr=False, compare=False)
    cache: ExpressionCache = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.result_type is None:
            raise InvalidArgumentError("Result type cannot be None")
        if not isinstance(self.result_type, ResultType):
            raise InvalidArgumentError(f"Result type must be a ResultType, got {type(self.result_type).__name__}")
        if self.source is None:
            raise InvalidArgumentError("Expression cannot be None")
        if not isinstance(self.source, str):
            raise InvalidArgumentError(f"Expression must be a string, got {type(self.source).__name__}")
        if self.parameters is None or isinstance(self.parameters, str) or not isinstance(self.parameters, Sequence):
            raise InvalidArgumentError("Parameters must be a sequence (use an empty tuple for none)")
        if self.engine is None:
            raise InvalidArgumentError("Expression engine cannot be None")
        if self.cache is None:
            raise InvalidArgumentError("Expression cache cannot be None")
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def evaluate(self, target: Any, index: Index = None) -> Any:
        """Evaluate the expression against *target*.

        Raises CompilationError, EvaluationError or TypeMismatchError.
        """
        compiled = self.cache.get_or_compile(self.source, self.engine)
        context = EvaluationContext(target=target, parameters=self.parameters, index=index)
        try:
            result = self.engine.evaluate(compiled, context, target)
        except Exception as exc:
            raise EvaluationError(self.source, exc) from exc
        return verify_result(self.result_type, self.source, result)

    def __call__(self, target: Any, index: Index = None) -> Any:
        return self.evaluate(target, index)
