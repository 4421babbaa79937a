"""Lenient numeric parsing for user-typed console input."""

import math


def parse_float(text: str | None) -> float | None:
    """Parse a decimal number, returning None when the text is not one.

    NaN and infinity are returned as-is; range checks happen elsewhere.
    """
    if text is None or "_" in text or not text.isascii():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_int(text: str | None) -> int | None:
    """Parse a signed whole number, returning None when the text is not one."""
    if text is None or "_" in text or not text.isascii():
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def format_bound(value: float) -> str:
    """Render a bound in its shortest form: -20.0 -> '-20', 4.5 -> '4.5'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return f"{value:g}"
