"""Multiplication table formatting."""

from collections.abc import Iterator

from ..config import CELL_WIDTH, HEADER_LABEL, ROW_LABEL_WIDTH


def render_header(size: int) -> str:
    return HEADER_LABEL + "".join(f"{j:>{CELL_WIDTH}}" for j in range(1, size + 1))


def render_separator(size: int) -> str:
    return "-" * (CELL_WIDTH + CELL_WIDTH * size)


def render_row(i: int, size: int) -> str:
    cells = "".join(f"{i * j:>{CELL_WIDTH}}" for j in range(1, size + 1))
    return f"{i:>{ROW_LABEL_WIDTH}} |{cells}"


def render_table(size: int) -> Iterator[str]:
    """
    Format an N x N multiplication grid as printable lines.

    Rows are produced one at a time as the caller iterates; the grid is
    never held in memory.

    Returns:
        Iterator over the header row, dash separator, then one row per
        multiplicand.
    """
    if size < 1:
        raise ValueError(f"Table size must be positive (got {size})")
    return _iter_table(size)


def _iter_table(size: int) -> Iterator[str]:
    yield render_header(size)
    yield render_separator(size)
    for i in range(1, size + 1):
        yield render_row(i, size)
