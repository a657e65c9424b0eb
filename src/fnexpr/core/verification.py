"""Runtime verification of expression results against declared types."""

from __future__ import annotations

from typing import Any

from fnexpr.exceptions import TypeMismatchError
from fnexpr.types.result import ResultType


def verify_result(result_type: ResultType, source: str, value: Any) -> Any:
    """Return *value* unchanged if it satisfies *result_type*.

    None always passes, as does any value for an unconstrained type. Raises
    TypeMismatchError otherwise; no conversion is attempted.
    """
    if value is None or not result_type.constrained:
        return value
    if not result_type.accepts(value):
        raise TypeMismatchError(source, result_type, type(value))
    return value
