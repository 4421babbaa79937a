"""Tests for the practice question."""

import random

import pytest

from console_drills.sources import ScriptedLineSource
from console_drills.tables import QuizOutcome, QuizQuestion, grade_answer, run_quiz


def expected_question(seed, size):
    """Draw the question a fresh random source with this seed would ask."""
    return QuizQuestion.draw(size, random.Random(seed))


class TestQuizQuestion:
    """Tests for QuizQuestion."""

    def test_product(self):
        assert QuizQuestion(a=7, b=8).product == 56

    @pytest.mark.parametrize("seed", range(20))
    def test_factors_within_size(self, seed):
        question = QuizQuestion.draw(4, random.Random(seed))
        assert 1 <= question.a <= 4
        assert 1 <= question.b <= 4

    def test_size_one_is_one_by_one(self):
        assert QuizQuestion.draw(1, random.Random()) == QuizQuestion(a=1, b=1)


class TestGradeAnswer:
    """Tests for grade_answer."""

    def test_outcomes(self):
        question = QuizQuestion(a=3, b=4)
        assert grade_answer(question, "12") is QuizOutcome.CORRECT
        assert grade_answer(question, " 12 ") is QuizOutcome.CORRECT
        assert grade_answer(question, "13") is QuizOutcome.WRONG
        assert grade_answer(question, "twelve") is QuizOutcome.INVALID
        assert grade_answer(question, None) is QuizOutcome.INVALID


class TestRunQuiz:
    """Tests for run_quiz."""

    def test_correct_answer(self, console, buffer):
        question = expected_question(42, 10)
        source = ScriptedLineSource([str(question.product)])

        outcome = run_quiz(10, source, console, random.Random(42))

        assert outcome is QuizOutcome.CORRECT
        assert "Correct! ☻" in buffer.getvalue()
        assert source.prompts == [f" What is {question.a} x {question.b}? "]

    def test_wrong_answer_shows_product(self, console, buffer):
        question = expected_question(7, 10)
        source = ScriptedLineSource([str(question.product + 1)])

        outcome = run_quiz(10, source, console, random.Random(7))

        assert outcome is QuizOutcome.WRONG
        assert f"Oops! The correct answer is {question.product} :D" in buffer.getvalue()

    def test_invalid_answer(self, console, buffer):
        outcome = run_quiz(10, ScriptedLineSource(["dunno"]), console, random.Random(1))
        assert outcome is QuizOutcome.INVALID
        assert "Oops! Not a valid number..." in buffer.getvalue()

    def test_asks_exactly_once(self, console):
        source = ScriptedLineSource(["x", "y", "z"])
        run_quiz(5, source, console, random.Random(3))
        assert len(source.prompts) == 1
