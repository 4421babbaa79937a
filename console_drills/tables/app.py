"""Multiplication table tool flow: size, grid, optional practice."""

import random

from rich.console import Console

from ..config import FAREWELL_MSG, GENERATING_MSG, PRACTICE_PROMPT, TABLE_TITLE
from ..output import emit
from ..sources import LineSource
from .quiz import run_quiz
from .renderer import render_table
from .size_selector import is_yes, select_table_size


def print_table(size: int, console: Console) -> None:
    emit(console)
    emit(console, GENERATING_MSG.format(size=size))
    emit(console)
    for line in render_table(size):
        emit(console, line)


def run_table_tool(source: LineSource, console: Console, rng: random.Random | None = None) -> int:
    """Run the whole interactive session and return the table size used."""
    emit(console, TABLE_TITLE)

    size = select_table_size(source, console)
    print_table(size, console)

    if is_yes(source.read_line(PRACTICE_PROMPT)):
        run_quiz(size, source, console, rng)

    emit(console)
    emit(console, FAREWELL_MSG)
    return size
