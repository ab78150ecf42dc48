"""Component listing archived presenter sessions."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from hquiz.core.quiz_manager import QuizManager

COLUMNS = ("Completed", "Questionnaire", "Answered", "Correct", "Finished")


class HistoryPanel(QWidget):
    """Read-only table of the most recent archived sessions, newest first."""

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.summary_label = QLabel("", self)
        layout.addWidget(self.summary_label)

        self.table = QTableWidget(0, len(COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(COLUMNS))
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table, stretch=1)

    def refresh(self) -> None:
        entries = list(reversed(self.quiz_manager.list_history()))
        current = self.quiz_manager.questionnaire

        self.table.setRowCount(len(entries))
        for row, entry in enumerate(entries):
            if current is not None and entry.questionnaire_id == current.id:
                name = current.title
            else:
                name = entry.questionnaire_id
            values = (
                entry.completed_at.astimezone().strftime("%Y-%m-%d %H:%M"),
                name,
                f"{entry.answered_count} / {len(entry.questions)}",
                str(entry.correct_count),
                "Yes" if entry.completed else "No",
            )
            for column, value in enumerate(values):
                self.table.setItem(row, column, QTableWidgetItem(value))

        if entries:
            self.summary_label.setText(f"{len(entries)} archived session(s)")
        else:
            self.summary_label.setText("No sessions have been archived yet.")
