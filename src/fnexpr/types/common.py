"""Cross-module type aliases."""

from __future__ import annotations

from typing import Any, TypeAlias

Parameters: TypeAlias = tuple[Any, ...]
Index: TypeAlias = int | None
