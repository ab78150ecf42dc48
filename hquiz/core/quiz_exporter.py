"""Serialization of questionnaires to the JSON file format used for imports."""

from __future__ import annotations

import json
import re

from hquiz.constants.storage_constants import DOCUMENT_INDENT, DOCUMENT_SUFFIX
from hquiz.core.models import Questionnaire

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]+")


def serialize_questionnaire(questionnaire: Questionnaire) -> str:
    """Render a questionnaire as pretty-printed JSON.

    The output only depends on the questionnaire's field values, so saving an
    unchanged questionnaire twice produces identical bytes.
    """
    payload = questionnaire.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=DOCUMENT_INDENT, ensure_ascii=False)


def suggested_filename(title: str) -> str:
    """Default file name offered when saving a questionnaire for the first time."""
    return _UNSAFE_FILENAME_CHARS.sub("_", title.lower()) + DOCUMENT_SUFFIX

