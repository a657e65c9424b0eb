"""Command-line interface for fnexpr."""
