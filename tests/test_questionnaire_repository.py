from datetime import datetime, timezone

import pytest

from hquiz.core.models import QuestionKind
from hquiz.core.services.questionnaire_repository import QuestionnaireRepository


@pytest.fixture
def repository():
    repository = QuestionnaireRepository(default_time_limit=45)
    repository.new_questionnaire("Draft")
    return repository


def _stale(repository):
    """Backdate the questionnaire so edits visibly advance updated_at."""
    old = datetime(2020, 1, 1, tzinfo=timezone.utc)
    repository.replace(repository.questionnaire.model_copy(update={"updated_at": old}))
    return old


def test_new_questionnaire_is_empty():
    repository = QuestionnaireRepository()
    assert not repository.has_questionnaire()

    questionnaire = repository.new_questionnaire()
    assert questionnaire.title == "New Questionnaire"
    assert questionnaire.questions == []
    assert questionnaire.created_at == questionnaire.updated_at
    assert repository.has_questionnaire()


def test_new_questionnaires_get_distinct_ids():
    repository = QuestionnaireRepository()
    assert repository.new_questionnaire().id != repository.new_questionnaire().id


def test_every_edit_stamps_updated_at(repository):
    old = _stale(repository)
    repository.update_details(title="Final")
    assert repository.questionnaire.title == "Final"
    assert repository.questionnaire.updated_at > old

    old = _stale(repository)
    question = repository.add_question()
    assert repository.questionnaire.updated_at > old

    old = _stale(repository)
    repository.update_question(question.id, prompt="Why?")
    assert repository.questionnaire.updated_at > old


def test_add_question_uses_default_time_limit(repository):
    question = repository.add_question()
    assert question.time_limit == 45
    assert question.answers == ["", "", "", ""]
    assert repository.questionnaire.questions == [question]


def test_add_true_false_question(repository):
    question = repository.add_question(QuestionKind.TRUE_FALSE)
    assert question.answers == ["true", "false"]


def test_update_question_clamps_time_limit(repository):
    question = repository.add_question()
    assert repository.update_question(question.id, time_limit=5000).time_limit == 600


def test_switching_to_true_false_resets_answers(repository):
    question = repository.add_question()
    repository.update_question(question.id, answers=["a", "b", "c", "d"], correct_answer=3)

    updated = repository.update_question(question.id, kind=QuestionKind.TRUE_FALSE)
    assert updated.answers == ["true", "false"]
    assert updated.correct_answer == 0


def test_switching_to_free_text_clears_correct_answer(repository):
    question = repository.add_question()
    repository.update_question(question.id, correct_answer=2)
    assert repository.update_question(question.id, kind=QuestionKind.FREE_TEXT).correct_answer == 0


def test_update_unknown_question_raises(repository):
    with pytest.raises(KeyError):
        repository.update_question("missing", prompt="x")


def test_delete_question(repository):
    first = repository.add_question()
    second = repository.add_question()
    repository.delete_question(first.id)
    assert repository.questionnaire.question_ids() == [second.id]


def test_move_question_stays_in_bounds(repository):
    a, b, c = (repository.add_question() for _ in range(3))

    assert repository.move_question(c.id, -1) == 1
    assert repository.questionnaire.question_ids() == [a.id, c.id, b.id]
    assert repository.move_question(a.id, -1) == 0
    assert repository.move_question(b.id, 5) == 2
    assert repository.questionnaire.question_ids() == [a.id, c.id, b.id]


def test_edits_require_a_questionnaire():
    with pytest.raises(RuntimeError):
        QuestionnaireRepository().add_question()
