"""Shared exception hierarchy for fnexpr."""

from __future__ import annotations

from .base import FnexprError
from .config import ConfigError
from .engine import EngineCompileError, EngineError, EngineEvaluationError
from .expression import (
    CompilationError,
    EvaluationError,
    ExpressionError,
    InvalidArgumentError,
    TypeMismatchError,
)

__all__ = [
    "CompilationError",
    "ConfigError",
    "EngineCompileError",
    "EngineError",
    "EngineEvaluationError",
    "EvaluationError",
    "ExpressionError",
    "FnexprError",
    "InvalidArgumentError",
    "TypeMismatchError",
]
