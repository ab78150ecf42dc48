"""Keys and file conventions for persisted HQuiz data."""

CACHE_ORGANIZATION: str = "HQuiz"
CACHE_APPLICATION: str = "HQuiz"

CACHE_KEY_QUESTIONNAIRE: str = "hquiz_questionnaire"
CACHE_KEY_SESSION_PROGRESS: str = "hquiz_session_progress"
CACHE_KEY_SESSIONS_HISTORY: str = "hquiz_sessions_history"
CACHE_KEY_SETTINGS: str = "hquiz_settings"

DOCUMENT_ENCODING: str = "utf-8"
DOCUMENT_INDENT: int = 2
DOCUMENT_SUFFIX: str = "_questionnaire.json"
DOCUMENT_FILE_FILTER: str = "Questionnaire files (*.json);;All files (*.*)"
