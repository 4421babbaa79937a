"""Single-question multiplication practice."""

import logging
import random
from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from ..config import QUIZ_CORRECT_MSG, QUIZ_INVALID_MSG, QUIZ_PROMPT, QUIZ_WRONG_MSG
from ..output import emit_notice
from ..parsing import parse_int
from ..sources import LineSource

logger = logging.getLogger(__name__)


class QuizOutcome(Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    INVALID = "invalid"


@dataclass(frozen=True)
class QuizQuestion:
    a: int
    b: int

    @property
    def product(self) -> int:
        return self.a * self.b

    @classmethod
    def draw(cls, size: int, rng: random.Random) -> "QuizQuestion":
        """Pick both factors uniformly from 1..size."""
        return cls(a=rng.randint(1, size), b=rng.randint(1, size))


def grade_answer(question: QuizQuestion, answer: str | None) -> QuizOutcome:
    value = parse_int(answer)
    if value is None:
        return QuizOutcome.INVALID
    return QuizOutcome.CORRECT if value == question.product else QuizOutcome.WRONG


def run_quiz(
    size: int,
    source: LineSource,
    console: Console,
    rng: random.Random | None = None,
) -> QuizOutcome:
    """Ask one random question, read one answer and report the result."""
    question = QuizQuestion.draw(size, rng or random.Random())
    answer = source.read_line(QUIZ_PROMPT.format(a=question.a, b=question.b))
    outcome = grade_answer(question, answer)
    logger.debug("Quiz %d x %d answered %r: %s", question.a, question.b, answer, outcome.value)

    if outcome is QuizOutcome.CORRECT:
        emit_notice(console, QUIZ_CORRECT_MSG, "green")
    elif outcome is QuizOutcome.WRONG:
        emit_notice(console, QUIZ_WRONG_MSG.format(product=question.product), "yellow")
    else:
        emit_notice(console, QUIZ_INVALID_MSG, "red")

    return outcome
