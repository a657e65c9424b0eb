"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "fnexpr.yaml"
DEFAULT_RESULT_TYPE_NAME: str = "object"

ALLOWED_TOP_KEYS: frozenset[str] = frozenset({"cache", "expressions"})
ALLOWED_CACHE_KEYS: frozenset[str] = frozenset({"max_entries"})
REQUIRED_EXPRESSION_KEYS: frozenset[str] = frozenset({"expr"})
ALLOWED_EXPRESSION_KEYS: frozenset[str] = REQUIRED_EXPRESSION_KEYS | {"type", "params"}
