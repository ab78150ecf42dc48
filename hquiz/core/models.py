"""Domain models for questionnaires and presenter progress.

The records double as the on-disk JSON shape: field aliases are the camelCase
keys used by questionnaire files and the local cache.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from hquiz.constants.quiz_constants import (
    DEFAULT_TIME_LIMIT_SECONDS,
    MAX_TIME_LIMIT_SECONDS,
    MIN_TIME_LIMIT_SECONDS,
    TRUE_FALSE_ANSWERS,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


class QuestionKind(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    IMAGE_CHOICE = "image-choice"
    TRUE_FALSE = "true-false"
    FREE_TEXT = "text"

    @property
    def is_choice(self) -> bool:
        return self in (QuestionKind.MULTIPLE_CHOICE, QuestionKind.IMAGE_CHOICE)

    @property
    def auto_evaluates(self) -> bool:
        """Whether clicking an option decides the outcome without manual judgment."""
        return self is not QuestionKind.FREE_TEXT


class Outcome(str, Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    TIMEOUT = "timeout"


def clamp_time_limit(value: Any) -> int:
    """Coerce a raw time limit into the supported range.

    Missing, zero and non-numeric values fall back to the default before the
    result is clamped to ``[MIN_TIME_LIMIT_SECONDS, MAX_TIME_LIMIT_SECONDS]``.
    """
    try:
        seconds = int(float(value))
    except (TypeError, ValueError):
        seconds = 0
    if seconds == 0:
        seconds = DEFAULT_TIME_LIMIT_SECONDS
    return max(MIN_TIME_LIMIT_SECONDS, min(MAX_TIME_LIMIT_SECONDS, seconds))


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Question(_Record):
    """Single question of a questionnaire."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    kind: QuestionKind = Field(default=QuestionKind.MULTIPLE_CHOICE, alias="type")
    prompt: str = Field(default="", alias="question")
    answers: list[str] = Field(default_factory=list, validate_default=True)
    correct_answer: int = Field(default=0, alias="correctAnswer")
    time_limit: int = Field(default=DEFAULT_TIME_LIMIT_SECONDS, alias="timeLimit")
    image: str | None = None

    @field_validator("time_limit", mode="before")
    @classmethod
    def _clamp_time_limit(cls, value: Any) -> int:
        return clamp_time_limit(value)

    @field_validator("answers")
    @classmethod
    def _fixed_true_false_answers(cls, value: list[str], info: ValidationInfo) -> list[str]:
        if info.data.get("kind") is QuestionKind.TRUE_FALSE:
            return list(TRUE_FALSE_ANSWERS)
        return value

    @property
    def correct_answer_text(self) -> str | None:
        if self.kind is QuestionKind.FREE_TEXT:
            return None
        if 0 <= self.correct_answer < len(self.answers):
            return self.answers[self.correct_answer]
        return None


class Questionnaire(_Record):
    """Authored, ordered set of questions plus metadata."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    description: str | None = None
    questions: list[Question] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=utc_now, alias="updatedAt")

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def question_ids(self) -> list[str]:
        return [question.id for question in self.questions]

    def index_of(self, question_id: str) -> int:
        for index, question in enumerate(self.questions):
            if question.id == question_id:
                return index
        raise KeyError(question_id)


class QuestionProgress(_Record):
    """Outcome record for one question within a session."""

    question_id: str = Field(alias="questionId")
    answered: bool = False
    correct: bool | None = None
    time_spent: int = Field(default=0, alias="timeSpent")
    selected_answer: int | None = Field(default=None, alias="selectedAnswer")

    @model_validator(mode="after")
    def _unanswered_has_no_result(self) -> QuestionProgress:
        if not self.answered and (self.correct is not None or self.selected_answer is not None):
            raise ValueError("An unanswered question cannot carry a result or a selection.")
        return self


class SessionProgress(_Record):
    """Progress of one presenter run through a questionnaire."""

    questionnaire_id: str = Field(alias="questionnaireId")
    session_id: str = Field(default_factory=new_id, alias="sessionId")
    started_at: datetime = Field(default_factory=utc_now, alias="startedAt")
    questions: list[QuestionProgress] = Field(default_factory=list)
    current_question_index: int = Field(default=-1, alias="currentQuestionIndex")
    completed: bool = False

    @classmethod
    def for_questionnaire(cls, questionnaire: Questionnaire) -> SessionProgress:
        """Create a fresh session with every question unanswered."""
        return cls(
            questionnaire_id=questionnaire.id,
            questions=[QuestionProgress(question_id=q.id) for q in questionnaire.questions],
        )

    @property
    def answered_count(self) -> int:
        return sum(1 for entry in self.questions if entry.answered)

    @property
    def correct_count(self) -> int:
        return sum(1 for entry in self.questions if entry.correct)

    def has_answers(self) -> bool:
        return any(entry.answered for entry in self.questions)

    def matches(self, questionnaire: Questionnaire) -> bool:
        """True when this session was created for the questionnaire's current shape."""
        return (
            self.questionnaire_id == questionnaire.id
            and [entry.question_id for entry in self.questions] == questionnaire.question_ids()
        )


class HistoryEntry(SessionProgress):
    """Archived session snapshot."""

    completed_at: datetime = Field(default_factory=utc_now, alias="completedAt")

    @classmethod
    def from_progress(cls, progress: SessionProgress, completed_at: datetime | None = None) -> HistoryEntry:
        data = progress.model_dump()
        data["completed_at"] = completed_at or utc_now()
        return cls.model_validate(data)

    def to_progress(self) -> SessionProgress:
        return SessionProgress.model_validate(self.model_dump(exclude={"completed_at"}))
