"""Configuration loading and evaluator construction for fnexpr.

This package facade re-exports all public names.
"""

from __future__ import annotations

from fnexpr.config.builder import build_evaluators, build_factory, validate_config
from fnexpr.config.loader import load_config, parse_config
from fnexpr.config.model import ExpressionDefinition, FnexprConfig

__all__ = [
    "ExpressionDefinition",
    "FnexprConfig",
    "build_evaluators",
    "build_factory",
    "load_config",
    "parse_config",
    "validate_config",
]
