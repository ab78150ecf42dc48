import json

import pytest

from hquiz.core.errors import DocumentValidationError
from hquiz.core.models import QuestionKind
from hquiz.core.quiz_exporter import serialize_questionnaire, suggested_filename
from hquiz.core.quiz_importer import parse_questionnaire

SAMPLE = """
{
  "id": "abc",
  "title": "Sample",
  "questions": [
    {"id": "1", "type": "true-false", "question": "Water is wet", "answers": ["yes", "no"], "correctAnswer": 0, "timeLimit": 5},
    {"id": "2", "type": "text", "question": "Name a colour", "answers": [], "correctAnswer": 0, "timeLimit": 9000},
    {"id": "3", "type": "image-choice", "question": "Pick one", "answers": ["a.png", "b.png"], "correctAnswer": 1, "timeLimit": "abc", "image": "data:image/png;base64,AAAA"}
  ],
  "createdAt": "2024-05-01T10:00:00Z",
  "updatedAt": "2024-05-01T10:05:00Z"
}
"""


def test_parse_reads_camel_case_document():
    questionnaire = parse_questionnaire(SAMPLE)

    assert questionnaire.title == "Sample"
    assert questionnaire.description is None
    assert [q.kind for q in questionnaire.questions] == [
        QuestionKind.TRUE_FALSE,
        QuestionKind.FREE_TEXT,
        QuestionKind.IMAGE_CHOICE,
    ]
    assert questionnaire.questions[2].correct_answer == 1
    assert questionnaire.questions[2].image.startswith("data:image/png")
    assert questionnaire.created_at.year == 2024
    assert questionnaire.created_at.tzinfo is not None


def test_parse_clamps_time_limits():
    limits = [q.time_limit for q in parse_questionnaire(SAMPLE).questions]
    assert limits == [10, 600, 60]


def test_true_false_answers_are_fixed():
    assert parse_questionnaire(SAMPLE).questions[0].answers == ["true", "false"]


@pytest.mark.parametrize(
    "content, message",
    [
        ("{", "not valid JSON"),
        ('"just a string"', "JSON object"),
        ('{"title": "T", "questions": []}', "id"),
        ('{"id": "x", "title": "", "questions": []}', "title"),
        ('{"id": "x", "title": "T", "questions": null}', "list"),
        ('{"id": "x", "title": "T", "questions": [{"id": "q", "type": "essay"}]}', "questions.0.type"),
    ],
)
def test_parse_rejects_malformed_documents(content, message):
    with pytest.raises(DocumentValidationError, match=message):
        parse_questionnaire(content)


def test_serialize_omits_missing_optionals(questionnaire):
    payload = json.loads(serialize_questionnaire(questionnaire))
    assert "image" not in payload["questions"][0]
    assert payload["questions"][0]["type"] == "multiple-choice"
    assert payload["questions"][0]["question"] == "Capital of Norway?"
    assert payload["createdAt"].startswith(str(questionnaire.created_at.year))


def test_serialize_is_deterministic(questionnaire):
    assert serialize_questionnaire(questionnaire) == serialize_questionnaire(questionnaire.model_copy())


def test_serialize_then_parse_is_equal(questionnaire):
    assert parse_questionnaire(serialize_questionnaire(questionnaire)) == questionnaire


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Capitals", "capitals_questionnaire.json"),
        ("World Capitals 2024", "world_capitals_2024_questionnaire.json"),
        ("Math: (x + y)^2!", "math_x_y_2__questionnaire.json"),
        ("Ærlig talt", "_rlig_talt_questionnaire.json"),
    ],
)
def test_suggested_filename(title, expected):
    assert suggested_filename(title) == expected
