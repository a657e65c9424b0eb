"""Tree-walking evaluator for compiled expression nodes.

Language-level failures (unknown variables, missing properties, navigation
through null) raise EngineEvaluationError. Exceptions raised by host Python
code, such as ZeroDivisionError or an error inside a called method, propagate
unchanged.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Mapping, Sized
from dataclasses import dataclass, replace
from numbers import Number
from typing import Any

from fnexpr.constants.engine import IS_EMPTY_PROPERTY, PRIVATE_NAME_PREFIX, SIZE_PROPERTY
from fnexpr.constants.variables import THIS_VARIABLE_NAME
from fnexpr.engine.nodes import (
    Binary,
    Conditional,
    IndexAccess,
    ListLiteral,
    Literal,
    Logical,
    MapLiteral,
    MethodCall,
    Node,
    Projection,
    PropertyAccess,
    Selection,
    Unary,
    Variable,
)
from fnexpr.exceptions import EngineEvaluationError


@dataclass(frozen=True)
class Scope:
    """Variables plus the object bare names resolve against."""

    variables: Mapping[str, Any]
    this: Any

    def lookup(self, name: str) -> Any:
        if name == THIS_VARIABLE_NAME:
            return self.this
        try:
            return self.variables[name]
        except KeyError:
            raise EngineEvaluationError(f"Unresolved variable '#{name}'") from None


def is_truthy(value: Any) -> bool:
    """OGNL truth: null and false are false, numbers are false when zero."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, Number):
        return value != 0
    return True


def to_text(value: Any) -> str:
    """Render a value for string concatenation."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_integral(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _add(left: Any, right: Any) -> Any:
    if isinstance(left, str) or isinstance(right, str):
        return to_text(left) + to_text(right)
    return left + right


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _div(left: Any, right: Any) -> Any:
    if _is_integral(left) and _is_integral(right):
        return _truncating_div(left, right)
    return left / right


def _mod(left: Any, right: Any) -> Any:
    if _is_integral(left) and _is_integral(right):
        return left - right * _truncating_div(left, right)
    return math.fmod(left, right)


_BINARY_OPERATIONS: dict[str, Callable[[Any, Any], Any]] = {
    "+": _add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _div,
    "%": _mod,
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda left, right: left in right,
    "not in": lambda left, right: left not in right,
}


def _check_attribute_name(name: str) -> None:
    if name.startswith(PRIVATE_NAME_PREFIX):
        raise EngineEvaluationError(f"Access to '{name}' is not allowed")


def read_property(obj: Any, name: str) -> Any:
    """Read *name* from *obj*: mapping key first, then attribute, then pseudo-property."""
    if obj is None:
        raise EngineEvaluationError(f"Cannot read property '{name}' of null")
    if isinstance(obj, Mapping):
        if name in obj:
            return obj[name]
    else:
        _check_attribute_name(name)
        if hasattr(obj, name):
            return getattr(obj, name)

    if isinstance(obj, Sized):
        if name == SIZE_PROPERTY:
            return len(obj)
        if name == IS_EMPTY_PROPERTY:
            return len(obj) == 0
    if isinstance(obj, Mapping):
        return None
    raise EngineEvaluationError(f"No property '{name}' on {type(obj).__name__}")


def call_method(obj: Any, name: str, args: tuple[Any, ...]) -> Any:
    if obj is None:
        raise EngineEvaluationError(f"Cannot call method '{name}' on null")
    _check_attribute_name(name)
    method = getattr(obj, name, None)
    if method is None or not callable(method):
        raise EngineEvaluationError(f"No method '{name}' on {type(obj).__name__}")
    return method(*args)


def read_index(obj: Any, key: Any) -> Any:
    if obj is None:
        raise EngineEvaluationError("Cannot index into null")
    if isinstance(obj, Mapping):
        return obj.get(key)
    if _is_integral(key) and key < 0:
        raise EngineEvaluationError(f"Index {key} out of range for {type(obj).__name__}")
    return obj[key]


def _iterate(obj: Any) -> Iterable[Any]:
    if obj is None:
        raise EngineEvaluationError("Cannot iterate over null")
    if not isinstance(obj, Iterable):
        raise EngineEvaluationError(f"Cannot iterate over {type(obj).__name__}")
    return obj


def evaluate_node(node: Node, scope: Scope) -> Any:
    """Evaluate *node* within *scope* and return the resulting value."""
    match node:
        case Literal(value=value):
            return value
        case Variable(name=name):
            return scope.lookup(name)
        case ListLiteral(items=items):
            return [evaluate_node(item, scope) for item in items]
        case MapLiteral(entries=entries):
            return {evaluate_node(key, scope): evaluate_node(value, scope) for key, value in entries}
        case PropertyAccess(target=target, name=name):
            obj = scope.this if target is None else evaluate_node(target, scope)
            return read_property(obj, name)
        case MethodCall(target=target, name=name, args=args):
            obj = scope.this if target is None else evaluate_node(target, scope)
            return call_method(obj, name, tuple(evaluate_node(arg, scope) for arg in args))
        case IndexAccess(target=target, key=key):
            return read_index(evaluate_node(target, scope), evaluate_node(key, scope))
        case Projection(target=target, body=body):
            return [evaluate_node(body, replace(scope, this=item)) for item in _iterate(evaluate_node(target, scope))]
        case Selection(target=target, predicate=predicate):
            return [
                item
                for item in _iterate(evaluate_node(target, scope))
                if is_truthy(evaluate_node(predicate, replace(scope, this=item)))
            ]
        case Unary(op="-", operand=operand):
            return -evaluate_node(operand, scope)
        case Unary(op="!", operand=operand):
            return not is_truthy(evaluate_node(operand, scope))
        case Logical(op="and", left=left, right=right):
            value = evaluate_node(left, scope)
            return evaluate_node(right, scope) if is_truthy(value) else value
        case Logical(op="or", left=left, right=right):
            value = evaluate_node(left, scope)
            return value if is_truthy(value) else evaluate_node(right, scope)
        case Binary(op=op, left=left, right=right):
            return _BINARY_OPERATIONS[op](evaluate_node(left, scope), evaluate_node(right, scope))
        case Conditional(test=test, then=then, otherwise=otherwise):
            branch = then if is_truthy(evaluate_node(test, scope)) else otherwise
            return evaluate_node(branch, scope)
    raise EngineEvaluationError(f"Unsupported expression node {type(node).__name__}")
