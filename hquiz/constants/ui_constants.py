"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "HQuiz"
WINDOW_MIN_WIDTH: int = 800
WINDOW_MIN_HEIGHT: int = 600
PLACEHOLDER_QUESTION: str = "Enter your question text (supports Markdown + LaTeX)."
UNTITLED_QUESTION: str = "Untitled question"

MODE_BUTTON_EDITOR: str = "Editor"
MODE_BUTTON_PRESENTER: str = "Presenter"
MODE_BUTTON_HISTORY: str = "History"

MENU_FILE: str = "&File"
MENU_NEW: str = "&New"
MENU_OPEN: str = "&Open..."
MENU_SAVE: str = "&Save"
MENU_SAVE_AS: str = "Save &As..."
MENU_IMPORT: str = "&Import..."
MENU_EXPORT: str = "&Export..."

OPEN_DIALOG_TITLE: str = "Open questionnaire"
SAVE_AS_DIALOG_TITLE: str = "Save questionnaire as"
IMPORT_DIALOG_TITLE: str = "Import questionnaire"
EXPORT_DIALOG_TITLE: str = "Export questionnaire"

EDITOR_ADD_BUTTON: str = "Add Question"
EDITOR_DELETE_BUTTON: str = "Delete Question"
EDITOR_UP_BUTTON: str = "Move Up"
EDITOR_DOWN_BUTTON: str = "Move Down"

KIND_LABELS: dict[str, str] = {
    "multiple-choice": "Multiple choice",
    "image-choice": "Image choice",
    "true-false": "True / False",
    "text": "Free text",
}

PRESENTER_BACK_BUTTON: str = "Back to Grid"
PRESENTER_CORRECT_BUTTON: str = "Correct"
PRESENTER_WRONG_BUTTON: str = "Wrong"
PRESENTER_RESET_BUTTON: str = "Restart Session"
PRESENTER_SHOW_TEXT_TOGGLE: str = "Show question text"
PRESENTER_TRUE_BUTTON: str = "TRUE"
PRESENTER_FALSE_BUTTON: str = "FALSE"

OUTCOME_LABELS: dict[str, str] = {
    "correct": "Correct!",
    "wrong": "Wrong",
    "timeout": "Time is up",
}

NO_QUESTIONS_MESSAGE: str = "This questionnaire has no questions yet. Add some in the editor."
