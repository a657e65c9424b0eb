"""Configuration-related exceptions."""

from __future__ import annotations

from fnexpr.exceptions.base import FnexprError


class ConfigError(FnexprError, ValueError):
    """Raised when an fnexpr configuration file is invalid."""
