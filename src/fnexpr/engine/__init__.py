"""Expression engines: the pluggable interface and the default OGNL-style engine."""

from __future__ import annotations

from .base import ExpressionEngine
from .nodes import CompiledExpression
from .ognl import OgnlEngine

__all__ = ["CompiledExpression", "ExpressionEngine", "OgnlEngine"]
