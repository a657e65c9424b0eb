"""Errors raised by expression engines themselves.

Engines raise these; the typed evaluation layer maps them onto
:class:`~fnexpr.exceptions.expression.CompilationError` and
:class:`~fnexpr.exceptions.expression.EvaluationError`.
"""

from __future__ import annotations

from fnexpr.exceptions.base import FnexprError


class EngineError(FnexprError):
    """Base class for engine-level failures."""


class EngineCompileError(EngineError):
    """Raised by an engine when expression text cannot be parsed."""


class EngineEvaluationError(EngineError):
    """Raised by an engine when a parsed expression fails to execute."""
