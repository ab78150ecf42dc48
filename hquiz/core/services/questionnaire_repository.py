"""Service holding the questionnaire being edited."""

from __future__ import annotations

from typing import Any

from hquiz.constants.quiz_constants import (
    DEFAULT_QUESTIONNAIRE_TITLE,
    DEFAULT_TIME_LIMIT_SECONDS,
    NEW_QUESTION_ANSWER_SLOTS,
)
from hquiz.core.models import Question, QuestionKind, Questionnaire, new_id, utc_now


class QuestionnaireRepository:
    """Owns the in-memory questionnaire and applies edits to it.

    Records are immutable, so every edit builds a new questionnaire with a
    fresh ``updated_at`` and returns it.
    """

    def __init__(self, default_time_limit: int = DEFAULT_TIME_LIMIT_SECONDS) -> None:
        self._questionnaire: Questionnaire | None = None
        self.default_time_limit = default_time_limit

    @property
    def questionnaire(self) -> Questionnaire | None:
        return self._questionnaire

    def has_questionnaire(self) -> bool:
        return self._questionnaire is not None

    def replace(self, questionnaire: Questionnaire) -> None:
        """Adopt a questionnaire loaded from elsewhere as-is."""
        self._questionnaire = questionnaire

    def new_questionnaire(self, title: str = DEFAULT_QUESTIONNAIRE_TITLE) -> Questionnaire:
        now = utc_now()
        self._questionnaire = Questionnaire(
            id=new_id(),
            title=title,
            description="",
            questions=[],
            created_at=now,
            updated_at=now,
        )
        return self._questionnaire

    def update_details(self, *, title: str | None = None, description: str | None = None) -> Questionnaire:
        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if description is not None:
            changes["description"] = description
        return self._commit(**changes)

    def add_question(self, kind: QuestionKind = QuestionKind.MULTIPLE_CHOICE) -> Question:
        question = Question(
            id=new_id(),
            kind=kind,
            prompt="",
            answers=[""] * NEW_QUESTION_ANSWER_SLOTS,
            correct_answer=0,
            time_limit=self.default_time_limit,
        )
        self._commit(questions=[*self._require().questions, question])
        return question

    def update_question(self, question_id: str, **changes: Any) -> Question:
        """Apply field changes to one question.

        Changes are re-validated, so time limits are clamped and switching to
        true/false resets the answers.
        """
        current = self._require()
        index = current.index_of(question_id)
        data = current.questions[index].model_dump()
        data.update(changes)
        if data.get("kind") == QuestionKind.FREE_TEXT:
            data["correct_answer"] = 0
        if changes.get("kind") == QuestionKind.TRUE_FALSE and data.get("correct_answer") not in (0, 1):
            data["correct_answer"] = 0
        updated = Question.model_validate(data)

        questions = list(current.questions)
        questions[index] = updated
        self._commit(questions=questions)
        return updated

    def delete_question(self, question_id: str) -> None:
        current = self._require()
        index = current.index_of(question_id)
        questions = list(current.questions)
        questions.pop(index)
        self._commit(questions=questions)

    def move_question(self, question_id: str, offset: int) -> int:
        """Move a question up (negative offset) or down. Returns its new index."""
        current = self._require()
        index = current.index_of(question_id)
        target = max(0, min(len(current.questions) - 1, index + offset))
        if target == index:
            return index
        questions = list(current.questions)
        questions.insert(target, questions.pop(index))
        self._commit(questions=questions)
        return target

    def _require(self) -> Questionnaire:
        if self._questionnaire is None:
            raise RuntimeError("No questionnaire is loaded.")
        return self._questionnaire

    def _commit(self, **changes: Any) -> Questionnaire:
        changes["updated_at"] = utc_now()
        self._questionnaire = self._require().model_copy(update=changes)
        return self._questionnaire
