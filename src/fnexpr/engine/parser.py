"""Lark parser and tree transformer for the OGNL-style expression subset."""

from __future__ import annotations

import ast
import functools
import logging

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedEOF, UnexpectedInput, UnexpectedToken, VisitError

from fnexpr.constants.engine import COMPARISON_KEYWORDS, GRAMMAR_PATH, GRAMMAR_START
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
from fnexpr.exceptions import EngineCompileError

logger = logging.getLogger(__name__)


@functools.cache
def load_parser() -> Lark:
    """Build the LALR parser once per process."""
    logger.debug("Loading expression grammar from %s", GRAMMAR_PATH)
    return Lark.open(str(GRAMMAR_PATH), parser="lalr", start=GRAMMAR_START, maybe_placeholders=True)


def _unquote(token: Token) -> str:
    return ast.literal_eval(str(token))


def _binary(op: str):
    def build(self: NodeBuilder, left: Node, right: Node) -> Binary:
        return Binary(op, left, right)

    return build


@v_args(inline=True)
class NodeBuilder(Transformer):
    """Turn a lark parse tree into :mod:`fnexpr.engine.nodes` objects."""

    def int_literal(self, token: Token) -> Literal:
        return Literal(int(token))

    def float_literal(self, token: Token) -> Literal:
        return Literal(float(token))

    def string_literal(self, token: Token) -> Literal:
        return Literal(_unquote(token))

    def true_literal(self) -> Literal:
        return Literal(True)

    def false_literal(self) -> Literal:
        return Literal(False)

    def null_literal(self) -> Literal:
        return Literal(None)

    def variable(self, name: Token) -> Variable:
        return Variable(str(name))

    def list_literal(self, items: tuple[Node, ...] | None) -> ListLiteral:
        return ListLiteral(items or ())

    def map_literal(self, entries: tuple[tuple[Node, Node], ...] | None) -> MapLiteral:
        return MapLiteral(entries or ())

    def args(self, *items: Node) -> tuple[Node, ...]:
        return items

    def pairs(self, *entries: tuple[Node, Node]) -> tuple[tuple[Node, Node], ...]:
        return entries

    def pair(self, key: Node, value: Node) -> tuple[Node, Node]:
        return (key, value)

    def this_property(self, name: Token) -> PropertyAccess:
        return PropertyAccess(None, str(name))

    def this_method_call(self, name: Token, args: tuple[Node, ...] | None) -> MethodCall:
        return MethodCall(None, str(name), args or ())

    def property_access(self, target: Node, name: Token) -> PropertyAccess:
        return PropertyAccess(target, str(name))

    def method_call(self, target: Node, name: Token, args: tuple[Node, ...] | None) -> MethodCall:
        return MethodCall(target, str(name), args or ())

    def index_access(self, target: Node, key: Node) -> IndexAccess:
        return IndexAccess(target, key)

    def projection(self, target: Node, body: Node) -> Projection:
        return Projection(target, body)

    def selection(self, target: Node, predicate: Node) -> Selection:
        return Selection(target, predicate)

    def negate(self, operand: Node) -> Unary:
        return Unary("-", operand)

    def logical_not(self, operand: Node) -> Unary:
        return Unary("!", operand)

    def and_op(self, left: Node, right: Node) -> Logical:
        return Logical("and", left, right)

    def or_op(self, left: Node, right: Node) -> Logical:
        return Logical("or", left, right)

    def conditional(self, test: Node, then: Node, otherwise: Node) -> Conditional:
        return Conditional(test, then, otherwise)

    add = _binary("+")
    sub = _binary("-")
    mul = _binary("*")
    div = _binary("/")
    mod = _binary("%")
    contains = _binary("in")
    not_contains = _binary("not in")
    eq = _binary(COMPARISON_KEYWORDS["eq"])
    ne = _binary(COMPARISON_KEYWORDS["neq"])
    lt = _binary(COMPARISON_KEYWORDS["lt"])
    le = _binary(COMPARISON_KEYWORDS["lte"])
    gt = _binary(COMPARISON_KEYWORDS["gt"])
    ge = _binary(COMPARISON_KEYWORDS["gte"])


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedEOF) or (isinstance(exc, UnexpectedToken) and exc.token.type == "$END"):
        return "unexpected end of expression"
    return f"unexpected input at column {exc.column}"


def parse_expression(source: str) -> Node:
    """Parse *source* into a node tree.

    Raises EngineCompileError when the text is not a valid expression.
    """
    try:
        tree = load_parser().parse(source)
    except UnexpectedInput as exc:
        raise EngineCompileError(_describe(exc)) from exc

    try:
        return NodeBuilder().transform(tree)
    except VisitError as exc:
        raise EngineCompileError(f"invalid literal: {exc.orig_exc}") from exc
