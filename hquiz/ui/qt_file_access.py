"""File dialogs for the document gateway."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QWidget

from hquiz.constants.ui_constants import OPEN_DIALOG_TITLE, SAVE_AS_DIALOG_TITLE
from hquiz.core.services.file_access import FileAccess


class QtFileAccess(FileAccess):
    """Shows ``QFileDialog`` pickers parented to the main window."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self.parent = parent
        self.open_title = OPEN_DIALOG_TITLE
        self.save_title = SAVE_AS_DIALOG_TITLE
        self._last_directory: Path = Path.home()

    def open_file(self, file_filter: str) -> Path | None:
        file_path, _ = QFileDialog.getOpenFileName(
            self.parent,
            self.open_title,
            str(self._last_directory),
            file_filter,
        )
        return self._remember(file_path)

    def save_file_as(self, default_name: str, file_filter: str) -> Path | None:
        file_path, _ = QFileDialog.getSaveFileName(
            self.parent,
            self.save_title,
            str(self._last_directory / default_name),
            file_filter,
        )
        return self._remember(file_path)

    def _remember(self, file_path: str) -> Path | None:
        if not file_path:
            return None
        path = Path(file_path)
        self._last_directory = path.parent
        return path
