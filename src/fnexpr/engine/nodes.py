"""Immutable syntax tree produced by compiling an expression.

Every node is a frozen dataclass so compiled trees can be cached and shared
between threads without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Variable:
    """``#name`` reference into the evaluation variables."""

    name: str


@dataclass(frozen=True)
class ListLiteral:
    items: tuple[Node, ...]


@dataclass(frozen=True)
class MapLiteral:
    entries: tuple[tuple[Node, Node], ...]


@dataclass(frozen=True)
class PropertyAccess:
    """Property read; a None target reads from the current ``#this``."""

    target: Node | None
    name: str


@dataclass(frozen=True)
class MethodCall:
    """Method invocation; a None target calls on the current ``#this``."""

    target: Node | None
    name: str
    args: tuple[Node, ...]


@dataclass(frozen=True)
class IndexAccess:
    target: Node
    key: Node


@dataclass(frozen=True)
class Projection:
    """``collection.{expr}``: evaluate *body* once per element."""

    target: Node
    body: Node


@dataclass(frozen=True)
class Selection:
    """``collection.{? expr}``: keep elements for which *predicate* holds."""

    target: Node
    predicate: Node


@dataclass(frozen=True)
class Unary:
    op: str
    operand: Node


@dataclass(frozen=True)
class Binary:
    op: str
    left: Node
    right: Node


@dataclass(frozen=True)
class Logical:
    """Short-circuiting ``and`` / ``or``."""

    op: str
    left: Node
    right: Node


@dataclass(frozen=True)
class Conditional:
    test: Node
    then: Node
    otherwise: Node


Node: TypeAlias = (
    Literal
    | Variable
    | ListLiteral
    | MapLiteral
    | PropertyAccess
    | MethodCall
    | IndexAccess
    | Projection
    | Selection
    | Unary
    | Binary
    | Logical
    | Conditional
)


@dataclass(frozen=True)
class CompiledExpression:
    """Parsed form of an expression source, ready for repeated evaluation."""

    source: str
    root: Node
