"""User preferences stored alongside the questionnaire cache."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hquiz.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS
from hquiz.constants.storage_constants import CACHE_KEY_SETTINGS
from hquiz.core.models import clamp_time_limit
from hquiz.core.services.local_cache import LocalCache

logger = logging.getLogger(__name__)


class AppSettings(BaseModel):
    """Preferences edited through the settings dialog."""

    model_config = ConfigDict(populate_by_name=True)

    default_time_limit: int = Field(default=DEFAULT_TIME_LIMIT_SECONDS, alias="defaultTimeLimit")
    auto_save: bool = Field(default=True, alias="autoSave")
    show_question_text: bool = Field(default=True, alias="showQuestionText")
    ui_font_size: int = Field(default=10, ge=8, le=24, alias="uiFontSize")
    game_font_size: int = Field(default=14, ge=10, le=32, alias="gameFontSize")

    @field_validator("default_time_limit", mode="before")
    @classmethod
    def _clamp_default_time_limit(cls, value: object) -> int:
        return clamp_time_limit(value)


def load_settings(cache: LocalCache) -> AppSettings:
    raw = cache.get(CACHE_KEY_SETTINGS)
    if raw is None:
        return AppSettings()
    try:
        return AppSettings.model_validate_json(raw)
    except ValidationError:
        logger.warning("Stored settings are invalid; using defaults", exc_info=True)
        return AppSettings()


def save_settings(cache: LocalCache, settings: AppSettings) -> None:
    cache.set(CACHE_KEY_SETTINGS, settings.model_dump_json(by_alias=True))
