"""Names of the predefined variables visible inside expressions."""

from __future__ import annotations

TARGET_VARIABLE_NAME: str = "target"
PARAM_VARIABLE_NAME: str = "param"
INDEX_VARIABLE_NAME: str = "index"

# Engine-provided, not part of the evaluation context.
THIS_VARIABLE_NAME: str = "this"
ROOT_VARIABLE_NAME: str = "root"
