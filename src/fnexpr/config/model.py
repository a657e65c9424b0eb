"""Config data model for fnexpr."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fnexpr.types.result import ANY, ResultType


@dataclass(frozen=True)
class ExpressionDefinition:
    """A named expression declared in configuration."""

    name: str
    source: str
    result_type: ResultType = ANY
    parameters: tuple[Any, ...] = ()


@dataclass(frozen=True)
class FnexprConfig:
    """Resolved fnexpr config."""

    cache_max_entries: int | None = None
    expressions: tuple[ExpressionDefinition, ...] = ()

    @property
    def expression_names(self) -> tuple[str, ...]:
        return tuple(definition.name for definition in self.expressions)

    def get(self, name: str) -> ExpressionDefinition | None:
        """Return the definition called *name*, if any."""
        for definition in self.expressions:
            if definition.name == name:
                return definition
        return None
