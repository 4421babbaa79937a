"""Console output helpers."""

from .console import make_console, emit, emit_notice

__all__ = ["make_console", "emit", "emit_notice"]
