"""Expression engine interface consumed by the typed evaluation core."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from fnexpr.core.context import EvaluationContext


class ExpressionEngine(ABC):
    """Compiles expression text and evaluates compiled expressions.

    Compiled objects must be immutable: the cache shares one compiled object
    between every evaluator and thread using the same source text.
    """

    name: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate engine subclasses define a non-empty `name`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        name = getattr(cls, "name", None)
        if not isinstance(name, str) or not name.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `name`")

    @abstractmethod
    def compile(self, source: str) -> Any:
        """Parse *source*; raise EngineCompileError when it is malformed."""

    @abstractmethod
    def evaluate(self, compiled: Any, context: EvaluationContext, root: Any) -> Any:
        """Evaluate *compiled* against *root* with the variables in *context*."""
