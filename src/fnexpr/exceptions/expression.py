"""Typed error taxonomy for expression construction and evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fnexpr.exceptions.base import FnexprError

if TYPE_CHECKING:
    from fnexpr.types.result import ResultType


class InvalidArgumentError(FnexprError, ValueError):
    """Raised when an evaluator is built without a result type or expression."""


class ExpressionError(FnexprError):
    """Base class for failures tied to a specific expression source."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source


class CompilationError(ExpressionError):
    """Raised when the engine rejects an expression as malformed."""

    def __init__(self, source: str, diagnostic: str) -> None:
        super().__init__(source, f'Cannot compile expression "{source}": {diagnostic}')
        self.diagnostic = diagnostic


class EvaluationError(ExpressionError):
    """Raised when a well-formed expression fails while executing.

    The engine failure is kept as ``__cause__``.
    """

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(source, f'Error evaluating expression "{source}": {cause}')
        self.cause = cause


class TypeMismatchError(ExpressionError, TypeError):
    """Raised when an expression result is not of the declared result type."""

    def __init__(self, source: str, expected: ResultType, actual: type) -> None:
        super().__init__(
            source,
            f'Result of expression "{source}" is of type {actual.__name__}, expected {expected.name}',
        )
        self.expected = expected
        self.actual = actual
