"""Helper functions for common dialog patterns in the HQuiz UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from hquiz.core.commands import CommandResult, CommandStatus


def _confirm(parent: QWidget, title: str, message: str) -> bool:
    reply = QMessageBox.question(
        parent,
        title,
        message,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def confirm_delete_question(parent: QWidget, question_number: int) -> bool:
    """Show confirmation dialog for deleting a question.

    Args:
        parent: Parent widget for the dialog
        question_number: The question number to display (1-indexed)

    Returns:
        True if user confirmed, False otherwise
    """
    return _confirm(
        parent,
        "Confirm Delete",
        f"Are you sure you want to delete question {question_number}?",
    )


def confirm_new_questionnaire(parent: QWidget) -> bool:
    """Show confirmation dialog for starting a new questionnaire."""
    return _confirm(
        parent,
        "Confirm New Questionnaire",
        "Starting a new questionnaire closes the current one. Unsaved file changes are kept only "
        "in the local backup. Continue?",
    )


def confirm_reset_session(parent: QWidget, answered_count: int) -> bool:
    """Show confirmation dialog for restarting the presenter session."""
    return _confirm(
        parent,
        "Restart Session",
        f"{answered_count} question(s) have been answered. The results will be moved to the "
        "history and a new session will start. Continue?",
    )


def show_command_result(parent: QWidget, title: str, result: CommandResult) -> None:
    """Report the outcome of a File command. Canceled commands are silent."""
    if result.status is CommandStatus.FAILED:
        show_error(parent, f"{title} failed", result.message)
    elif result.status is CommandStatus.OK and result.message:
        show_info(parent, title, result.message)


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Warning message
    """
    QMessageBox.warning(parent, title, message)
