"""Application entry point for HQuiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from hquiz.constants.about import APP_NAME, APP_VERSION
from hquiz.core.quiz_manager import QuizManager
from hquiz.core.services.local_cache import SettingsCache
from hquiz.ui.main_window import MainWindow
from hquiz.ui.qt_file_access import QtFileAccess
from hquiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, restore the last questionnaire, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)

    file_access = QtFileAccess()
    quiz_manager = QuizManager(SettingsCache(), file_access)
    questionnaire = quiz_manager.restore_last_questionnaire()
    logger.info("Loaded questionnaire '%s' (%d questions)", questionnaire.title, questionnaire.question_count)

    window = MainWindow(quiz_manager=quiz_manager, file_access=file_access)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
