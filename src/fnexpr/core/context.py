"""Immutable evaluation context built for a single expression invocation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fnexpr.constants.variables import INDEX_VARIABLE_NAME, PARAM_VARIABLE_NAME, TARGET_VARIABLE_NAME
from fnexpr.types.common import Index, Parameters


@dataclass(frozen=True)
class EvaluationContext:
    """Variables exposed to the engine during one evaluation.

    ``index`` is the zero-based traversal position, or None outside a traversal.
    """

    target: Any
    parameters: Parameters = ()
    index: Index = None

    def variables(self) -> dict[str, Any]:
        """Return the context as a fresh name -> value mapping."""
        return {
            TARGET_VARIABLE_NAME: self.target,
            PARAM_VARIABLE_NAME: self.parameters,
            INDEX_VARIABLE_NAME: self.index,
        }
