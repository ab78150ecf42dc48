"""Service running a live presentation of one questionnaire.

The presenter moves between three states:

    IDLE     the question grid is shown, no question is active
    RUNNING  a question is shown and its countdown is ticking
    JUDGED   the outcome is recorded and the answer is revealed

Only the countdown produces events on its own; everything else comes from the
presenter. Rejected actions never raise: they are logged, kept as
``last_violation`` and reported through ``on_violation``.
"""

from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Callable

from hquiz.core.countdown import Countdown
from hquiz.core.errors import StateViolation, ViolationReason, WriteFailedError
from hquiz.core.models import Outcome, Question, QuestionProgress, Questionnaire, SessionProgress
from hquiz.core.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


class PresenterState(Enum):
    IDLE = auto()
    RUNNING = auto()
    JUDGED = auto()


class PresenterSession:
    """State machine for one questionnaire's live session."""

    def __init__(
        self,
        questionnaire: Questionnaire,
        store: ProgressStore,
        countdown: Countdown | None = None,
        *,
        on_change: Callable[[], None] | None = None,
        on_violation: Callable[[StateViolation], None] | None = None,
        on_write_failed: Callable[[WriteFailedError], None] | None = None,
    ) -> None:
        self._questionnaire = questionnaire
        self._store = store
        self._countdown = countdown or Countdown()
        self.on_change = on_change
        self.on_violation = on_violation
        self.on_write_failed = on_write_failed

        self._state = PresenterState.IDLE
        self._last_outcome: Outcome | None = None
        self.last_violation: StateViolation | None = None
        self._progress = self._resume_or_create()

    # --- Queries ---

    @property
    def state(self) -> PresenterState:
        return self._state

    @property
    def questionnaire(self) -> Questionnaire:
        return self._questionnaire

    @property
    def progress(self) -> SessionProgress:
        return self._progress

    @property
    def current_question_index(self) -> int:
        return self._progress.current_question_index

    @property
    def active_question(self) -> Question | None:
        index = self._progress.current_question_index
        if self._state is PresenterState.IDLE or index < 0:
            return None
        return self._questionnaire.questions[index]

    @property
    def remaining_seconds(self) -> int:
        if self._state is PresenterState.IDLE:
            return 0
        return self._countdown.remaining

    @property
    def last_outcome(self) -> Outcome | None:
        return self._last_outcome

    @property
    def question_count(self) -> int:
        return len(self._progress.questions)

    @property
    def answered_count(self) -> int:
        return self._progress.answered_count

    def is_answered(self, index: int) -> bool:
        return 0 <= index < len(self._progress.questions) and self._progress.questions[index].answered

    def question_result(self, index: int) -> bool | None:
        """``True``/``False`` for answered questions, ``None`` otherwise."""
        if not self.is_answered(index):
            return None
        return bool(self._progress.questions[index].correct)

    # --- Transitions ---

    def start_question(self, index: int) -> bool:
        """Open a question and start its countdown.

        Allowed from the grid and from a judged question (which is left
        first); a running question has to be judged or abandoned.
        """
        if self._state is PresenterState.RUNNING:
            return self._reject(ViolationReason.NOT_IDLE, "Judge or leave the running question first.")
        if not 0 <= index < len(self._progress.questions):
            return self._reject(ViolationReason.INVALID_INDEX, f"There is no question {index + 1}.")
        if self._progress.questions[index].answered:
            return self._reject(ViolationReason.ALREADY_ANSWERED, f"Question {index + 1} was already answered.")

        question = self._questionnaire.questions[index]
        self._countdown.cancel()
        self._progress.current_question_index = index
        self._last_outcome = None
        self._state = PresenterState.RUNNING
        self._countdown.start(question.time_limit, on_expire=self._handle_expired, on_tick=self._handle_tick)
        logger.info("Started question %d (%ds)", index + 1, question.time_limit)
        self._persist()
        self._notify()
        return True

    def judge(self, outcome: Outcome, selected_answer: int | None = None) -> bool:
        """Record the outcome of the running question."""
        if self._state is not PresenterState.RUNNING:
            return self._reject(ViolationReason.NOT_RUNNING, "No question is waiting for a judgment.")

        self._countdown.cancel()
        index = self._progress.current_question_index
        question = self._questionnaire.questions[index]
        if outcome is Outcome.TIMEOUT:
            time_spent = question.time_limit
        else:
            time_spent = question.time_limit - self._countdown.remaining
        self._progress.questions[index] = QuestionProgress(
            question_id=question.id,
            answered=True,
            correct=outcome is Outcome.CORRECT,
            time_spent=time_spent,
            selected_answer=selected_answer,
        )
        self._progress.completed = all(entry.answered for entry in self._progress.questions)
        self._last_outcome = outcome
        self._state = PresenterState.JUDGED
        logger.info("Question %d judged %s after %ds", index + 1, outcome.value, time_spent)
        self._persist()
        self._notify()
        return True

    def select_answer(self, option_index: int) -> bool:
        """Judge the running question by the option the audience picked."""
        if self._state is not PresenterState.RUNNING:
            return self._reject(ViolationReason.NOT_RUNNING, "No question is waiting for an answer.")
        question = self._questionnaire.questions[self._progress.current_question_index]
        if not question.kind.auto_evaluates:
            return self._reject(
                ViolationReason.MANUAL_JUDGMENT_REQUIRED,
                "Free-text answers must be judged with the Correct / Wrong buttons.",
            )
        if not 0 <= option_index < len(question.answers):
            return self._reject(ViolationReason.INVALID_OPTION, f"Question has no option {option_index + 1}.")

        outcome = Outcome.CORRECT if option_index == question.correct_answer else Outcome.WRONG
        return self.judge(outcome, selected_answer=option_index)

    def mark_correct(self) -> bool:
        return self.judge(Outcome.CORRECT)

    def mark_wrong(self) -> bool:
        return self.judge(Outcome.WRONG)

    def return_to_grid(self) -> bool:
        """Leave the active question. A running question stays unanswered."""
        if self._state is PresenterState.IDLE:
            return self._reject(ViolationReason.NOT_ACTIVE, "No question is open.")
        self._countdown.cancel()
        self._state = PresenterState.IDLE
        self._last_outcome = None
        self._progress.current_question_index = -1
        self._persist()
        self._notify()
        return True

    def reset_session(self) -> SessionProgress:
        """Archive the current session if it has answers and start a new one."""
        self._countdown.cancel()
        if self._state is PresenterState.RUNNING:
            # The running question is abandoned, not answered.
            self._progress.current_question_index = -1
        if self._progress.has_answers():
            self._archive(self._progress)
        self._progress = SessionProgress.for_questionnaire(self._questionnaire)
        self._state = PresenterState.IDLE
        self._last_outcome = None
        logger.info("Started session %s", self._progress.session_id)
        self._persist()
        self._notify()
        return self._progress

    def close(self) -> None:
        """Stop the countdown when the presenter view goes away."""
        self._countdown.cancel()

    # --- Internals ---

    def _resume_or_create(self) -> SessionProgress:
        stored = self._store.load()
        if stored is not None and stored.matches(self._questionnaire):
            stored.current_question_index = -1
            logger.info("Resuming session %s", stored.session_id)
            return stored

        if stored is not None and stored.has_answers():
            logger.info("Stored session %s belongs to another questionnaire; archiving it", stored.session_id)
            self._archive(stored)

        progress = SessionProgress.for_questionnaire(self._questionnaire)
        self._save(progress)
        return progress

    def _handle_tick(self, remaining: int) -> None:
        self._notify()

    def _handle_expired(self) -> None:
        if self._state is PresenterState.RUNNING:
            self.judge(Outcome.TIMEOUT)

    def _reject(self, reason: ViolationReason, detail: str) -> bool:
        violation = StateViolation(reason=reason, detail=detail)
        self.last_violation = violation
        logger.warning("Rejected presenter action: %s", violation)
        if self.on_violation is not None:
            self.on_violation(violation)
        return False

    def _persist(self) -> None:
        self._save(self._progress)

    def _save(self, progress: SessionProgress) -> None:
        try:
            self._store.save(progress)
        except WriteFailedError as exc:
            self._report_write_failure(exc)

    def _archive(self, progress: SessionProgress) -> None:
        try:
            self._store.append_history(progress)
        except WriteFailedError as exc:
            self._report_write_failure(exc)

    def _report_write_failure(self, exc: WriteFailedError) -> None:
        logger.warning("Session progress was not saved: %s", exc)
        if self.on_write_failed is not None:
            self.on_write_failed(exc)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
