"""Validation rules for questionnaire documents."""

from __future__ import annotations

from typing import Any

from hquiz.constants.quiz_constants import MIN_CHOICE_ANSWERS
from hquiz.core.errors import DocumentValidationError
from hquiz.core.models import QuestionKind, Questionnaire


def validate_questionnaire(questionnaire: Questionnaire) -> None:
    """Check that a questionnaire can be presented.

    Raises:
        DocumentValidationError: with the first problem found.
    """
    if not questionnaire.title.strip():
        raise DocumentValidationError("Questionnaire title must not be empty.")

    for number, question in enumerate(questionnaire.questions, start=1):
        if not question.id.strip():
            raise DocumentValidationError(f"Question {number} has no id.")
        if question.kind.is_choice:
            if len(question.answers) < MIN_CHOICE_ANSWERS:
                raise DocumentValidationError(
                    f"Question {number} needs at least {MIN_CHOICE_ANSWERS} answers."
                )
            if not 0 <= question.correct_answer < len(question.answers):
                raise DocumentValidationError(
                    f"Question {number} marks answer {question.correct_answer + 1} as correct, "
                    f"but only has {len(question.answers)} answers."
                )
        elif question.kind is QuestionKind.TRUE_FALSE and question.correct_answer not in (0, 1):
            raise DocumentValidationError(f"Question {number} must be either true or false.")


def check_minimal_shape(raw: Any) -> None:
    """Reject decoded JSON that is not shaped like a questionnaire at all."""
    if not isinstance(raw, dict):
        raise DocumentValidationError("Questionnaire file must contain a JSON object.")
    if not raw.get("id"):
        raise DocumentValidationError("Questionnaire is missing its id.")
    if not raw.get("title"):
        raise DocumentValidationError("Questionnaire is missing its title.")
    if not isinstance(raw.get("questions"), list):
        raise DocumentValidationError("Questionnaire questions must be a list.")
