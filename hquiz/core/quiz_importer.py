"""Parsing of questionnaire documents from their JSON file format.

File format (UTF-8 JSON, camelCase keys, ISO-8601 timestamps):

    {
      "id": "4f1c...",
      "title": "Capitals",
      "description": "Warm-up round",
      "questions": [
        {
          "id": "9a0e...",
          "type": "multiple-choice",
          "question": "What is the capital of Norway?",
          "answers": ["Bergen", "Oslo", "Trondheim", "Tromsø"],
          "correctAnswer": 1,
          "timeLimit": 30
        }
      ],
      "createdAt": "2024-05-01T10:00:00Z",
      "updatedAt": "2024-05-01T10:05:00Z"
    }

Only the outer shape (id, title, list of questions) is required to open or
import a file; stricter rules are applied by
:func:`hquiz.core.validation.validate_questionnaire` before presenting.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from hquiz.core.errors import DocumentValidationError
from hquiz.core.models import Questionnaire
from hquiz.core.validation import check_minimal_shape


def parse_questionnaire(content: str) -> Questionnaire:
    """Decode questionnaire JSON text.

    Raises:
        DocumentValidationError: if the text is not JSON or not questionnaire-shaped.
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as exc:
        raise DocumentValidationError(f"File is not valid JSON: {exc.msg} (line {exc.lineno}).") from exc

    check_minimal_shape(raw)

    try:
        return Questionnaire.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise DocumentValidationError(f"Invalid questionnaire field '{location}': {first['msg']}") from exc

