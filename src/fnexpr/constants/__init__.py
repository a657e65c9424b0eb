"""Constant values shared across fnexpr modules."""
