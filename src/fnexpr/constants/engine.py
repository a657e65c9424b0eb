"""Constants for the built-in OGNL-style expression engine."""

from __future__ import annotations

from pathlib import Path

GRAMMAR_PATH: Path = Path(__file__).resolve().parent.parent / "engine" / "grammar.lark"
GRAMMAR_START: str = "start"

# Pseudo-properties answered for any sized object lacking a real attribute.
SIZE_PROPERTY: str = "size"
IS_EMPTY_PROPERTY: str = "isEmpty"

COMPARISON_KEYWORDS: dict[str, str] = {
    "eq": "==",
    "neq": "!=",
    "lt": "<",
    "lte": "<=",
    "gt": ">",
    "gte": ">=",
}

# Attribute names with this prefix are never resolved on host objects.
PRIVATE_NAME_PREFIX: str = "_"
