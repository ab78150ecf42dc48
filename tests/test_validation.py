import pytest

from hquiz.core.errors import DocumentValidationError
from hquiz.core.models import Question, QuestionKind
from hquiz.core.validation import validate_questionnaire


def _with_questions(questionnaire, *questions):
    return questionnaire.model_copy(update={"questions": list(questions)})


def test_valid_questionnaire_passes(questionnaire, mixed_questionnaire):
    validate_questionnaire(questionnaire)
    validate_questionnaire(mixed_questionnaire)


def test_empty_title_is_rejected(questionnaire):
    with pytest.raises(DocumentValidationError, match="title"):
        validate_questionnaire(questionnaire.model_copy(update={"title": "   "}))


def test_question_without_id_is_rejected(questionnaire):
    broken = _with_questions(questionnaire, Question(id="", answers=["a", "b"]))
    with pytest.raises(DocumentValidationError, match="no id"):
        validate_questionnaire(broken)


@pytest.mark.parametrize("kind", [QuestionKind.MULTIPLE_CHOICE, QuestionKind.IMAGE_CHOICE])
def test_choice_question_needs_two_answers(questionnaire, kind):
    broken = _with_questions(questionnaire, Question(id="q", kind=kind, answers=["only"]))
    with pytest.raises(DocumentValidationError, match="at least 2"):
        validate_questionnaire(broken)


@pytest.mark.parametrize("correct", [-1, 2])
def test_choice_correct_answer_must_be_in_range(questionnaire, correct):
    broken = _with_questions(questionnaire, Question(id="q", answers=["a", "b"], correct_answer=correct))
    with pytest.raises(DocumentValidationError, match="Question 1"):
        validate_questionnaire(broken)


def test_true_false_correct_answer_must_be_zero_or_one(questionnaire):
    broken = _with_questions(questionnaire, Question(id="q", kind=QuestionKind.TRUE_FALSE, correct_answer=2))
    with pytest.raises(DocumentValidationError, match="true or false"):
        validate_questionnaire(broken)


def test_free_text_ignores_answers(questionnaire):
    validate_questionnaire(_with_questions(questionnaire, Question(id="q", kind=QuestionKind.FREE_TEXT, correct_answer=7)))


def test_empty_questionnaire_is_valid_document(questionnaire):
    validate_questionnaire(_with_questions(questionnaire))
