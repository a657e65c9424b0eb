"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "fnexpr"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: typed, cached expression evaluation"
