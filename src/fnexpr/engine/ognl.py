"""Default engine: an OGNL-style expression subset parsed with lark."""

from __future__ import annotations

from typing import Any

from fnexpr.constants.variables import ROOT_VARIABLE_NAME
from fnexpr.core.context import EvaluationContext
from fnexpr.engine.base import ExpressionEngine
from fnexpr.engine.interpreter import Scope, evaluate_node
from fnexpr.engine.nodes import CompiledExpression
from fnexpr.engine.parser import parse_expression
from fnexpr.exceptions import EngineCompileError, EngineEvaluationError


class OgnlEngine(ExpressionEngine):
    """Evaluates ``#target``/``#param``/``#index`` expressions in OGNL syntax.

    Example::

        engine = OgnlEngine()
        compiled = engine.compile("#target + #param[0]")
        engine.evaluate(compiled, EvaluationContext(target=5, parameters=(10,)), 5)  # 15
    """

    name = "ognl"

    def compile(self, source: str) -> CompiledExpression:
        if not isinstance(source, str):
            raise EngineCompileError(f"expression must be a string, got {type(source).__name__}")
        return CompiledExpression(source=source, root=parse_expression(source))

    def evaluate(self, compiled: CompiledExpression, context: EvaluationContext, root: Any) -> Any:
        if not isinstance(compiled, CompiledExpression):
            raise EngineEvaluationError(f"{self.name} engine cannot evaluate {type(compiled).__name__}")
        variables = context.variables()
        variables[ROOT_VARIABLE_NAME] = root
        return evaluate_node(compiled.root, Scope(variables=variables, this=root))
