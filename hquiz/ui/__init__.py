"""Qt UI components for the HQuiz desktop application."""

from .dialog_helpers import (
    confirm_delete_question,
    confirm_new_questionnaire,
    confirm_reset_session,
    show_command_result,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow
from .question_renderer import render_question

__all__ = [
    "MainWindow",
    "confirm_delete_question",
    "confirm_new_questionnaire",
    "confirm_reset_session",
    "show_command_result",
    "show_error",
    "show_info",
    "show_warning",
    "render_question",
]
