import pytest
from pydantic import ValidationError

from hquiz.core.models import (
    HistoryEntry,
    Question,
    QuestionKind,
    QuestionProgress,
    SessionProgress,
    clamp_time_limit,
)


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 60), (0, 60), ("", 60), ("45", 45), (3, 10), (10, 10), (600, 600), (601, 600), (12.7, 12)],
)
def test_clamp_time_limit(raw, expected):
    assert clamp_time_limit(raw) == expected


def test_question_defaults():
    question = Question(id="q")
    assert question.kind is QuestionKind.MULTIPLE_CHOICE
    assert question.time_limit == 60
    assert question.answers == []
    assert question.image is None


def test_question_is_immutable():
    question = Question(id="q")
    with pytest.raises(ValidationError):
        question.prompt = "changed"


def test_true_false_question_always_has_fixed_answers():
    question = Question(id="q", kind=QuestionKind.TRUE_FALSE, answers=["ja", "nei", "kanskje"], correct_answer=1)
    assert question.answers == ["true", "false"]
    assert question.correct_answer_text == "false"


def test_correct_answer_text():
    assert Question(id="q", answers=["a", "b"], correct_answer=1).correct_answer_text == "b"
    assert Question(id="q", answers=["a"], correct_answer=4).correct_answer_text is None
    assert Question(id="q", kind=QuestionKind.FREE_TEXT).correct_answer_text is None


def test_kind_capabilities():
    assert QuestionKind.IMAGE_CHOICE.is_choice
    assert not QuestionKind.TRUE_FALSE.is_choice
    assert QuestionKind.TRUE_FALSE.auto_evaluates
    assert not QuestionKind.FREE_TEXT.auto_evaluates


def test_questionnaire_lookup(questionnaire):
    assert questionnaire.question_count == 3
    assert questionnaire.question_ids() == ["q1", "q2", "q3"]
    assert questionnaire.index_of("q3") == 2
    with pytest.raises(KeyError):
        questionnaire.index_of("missing")


def test_unanswered_progress_cannot_carry_a_result():
    with pytest.raises(ValidationError):
        QuestionProgress(question_id="q", answered=False, correct=True)
    with pytest.raises(ValidationError):
        QuestionProgress(question_id="q", selected_answer=0)


def test_session_for_questionnaire(questionnaire):
    progress = SessionProgress.for_questionnaire(questionnaire)
    other = SessionProgress.for_questionnaire(questionnaire)

    assert progress.session_id != other.session_id
    assert progress.current_question_index == -1
    assert progress.completed is False
    assert progress.matches(questionnaire)
    assert not progress.has_answers()


def test_session_no_longer_matches_reordered_questionnaire(questionnaire):
    progress = SessionProgress.for_questionnaire(questionnaire)
    reordered = questionnaire.model_copy(update={"questions": list(reversed(questionnaire.questions))})
    assert not progress.matches(reordered)


def test_session_counts(questionnaire):
    progress = SessionProgress.for_questionnaire(questionnaire)
    progress.questions[0] = QuestionProgress(question_id="q1", answered=True, correct=True, time_spent=4)
    progress.questions[1] = QuestionProgress(question_id="q2", answered=True, correct=False, time_spent=30)
    assert progress.answered_count == 2
    assert progress.correct_count == 1
    assert progress.has_answers()


def test_history_entry_snapshot_is_independent(questionnaire):
    progress = SessionProgress.for_questionnaire(questionnaire)
    entry = HistoryEntry.from_progress(progress)

    progress.questions[0] = QuestionProgress(question_id="q1", answered=True, correct=True)
    assert not entry.questions[0].answered
    assert entry.session_id == progress.session_id
    assert entry.completed_at >= entry.started_at
