"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TIME_LIMIT_SECONDS: int = 60
MIN_TIME_LIMIT_SECONDS: int = 10
MAX_TIME_LIMIT_SECONDS: int = 600
TIME_LIMIT_WARNING_SECONDS: int = 10
TICK_INTERVAL_MS: int = 1000

TRUE_FALSE_ANSWERS: tuple[str, str] = ("true", "false")
NEW_QUESTION_ANSWER_SLOTS: int = 4
MIN_CHOICE_ANSWERS: int = 2

DEFAULT_QUESTIONNAIRE_TITLE: str = "New Questionnaire"
HISTORY_RETENTION: int = 10
