"""Multiplication table printer with an optional practice question."""

from .app import print_table, run_table_tool
from .quiz import QuizOutcome, QuizQuestion, grade_answer, run_quiz
from .renderer import render_table
from .size_selector import select_table_size

__all__ = [
    "print_table",
    "run_table_tool",
    "QuizOutcome",
    "QuizQuestion",
    "grade_answer",
    "run_quiz",
    "render_table",
    "select_table_size",
]
