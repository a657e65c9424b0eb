"""Root of the fnexpr exception hierarchy."""

from __future__ import annotations


class FnexprError(Exception):
    """Base class for every error raised by fnexpr."""
