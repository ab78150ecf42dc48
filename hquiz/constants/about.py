"""Static metadata describing HQuiz."""

APP_NAME = "HQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "HQuiz is a desktop quiz editor and presenter built with Qt. "
    "Author questionnaires with timed questions, then present them one question at a time "
    "and keep track of each session's results."
)

HELP_TEXT = (
    "Editor: use File > New, Open, Save and Save As to manage questionnaire files (.json). "
    "Every change is also kept in a local backup, so the last questionnaire reopens on start-up.\n\n"
    "Presenter: pick a question from the grid to start its countdown. Click the answer the "
    "audience gave, or use 'Correct' / 'Wrong' to judge it yourself. When the countdown "
    "reaches zero the question is marked as timed out.\n\n"
    "'Restart Session' archives the current results to the history and starts over. "
    "The last ten sessions are kept."
)
