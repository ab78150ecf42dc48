"""Settings dialog for configuring HQuiz preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from hquiz.constants.quiz_constants import MAX_TIME_LIMIT_SECONDS, MIN_TIME_LIMIT_SECONDS
from hquiz.core.settings import AppSettings


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(self, settings: AppSettings, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._settings = settings

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Font settings group
        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        self.ui_font_spinbox = self._add_spin_row(
            font_layout,
            "UI Font Size (buttons, menus):",
            "Font size for buttons, menus, and controls",
            8,
            24,
            self._settings.ui_font_size,
            " pt",
        )
        self.game_font_spinbox = self._add_spin_row(
            font_layout,
            "Presenter Font Size (questions, timer):",
            "Font size for the presenter view: questions, answers, and countdown",
            10,
            32,
            self._settings.game_font_size,
            " pt",
        )
        layout.addWidget(font_group)

        # Questionnaire settings group
        quiz_group = QGroupBox("Questionnaires")
        quiz_layout = QVBoxLayout()
        quiz_group.setLayout(quiz_layout)

        self.time_limit_spinbox = self._add_spin_row(
            quiz_layout,
            "Default time limit for new questions:",
            "Time limit given to questions added in the editor",
            MIN_TIME_LIMIT_SECONDS,
            MAX_TIME_LIMIT_SECONDS,
            self._settings.default_time_limit,
            " s",
        )

        self.auto_save_checkbox = QCheckBox("Save every edit automatically")
        self.auto_save_checkbox.setToolTip(
            "When enabled, every change is written to the open file (if any) and the local backup."
        )
        self.auto_save_checkbox.setChecked(self._settings.auto_save)
        quiz_layout.addWidget(self.auto_save_checkbox)

        self.show_text_checkbox = QCheckBox("Show question text in the presenter grid")
        self.show_text_checkbox.setChecked(self._settings.show_question_text)
        quiz_layout.addWidget(self.show_text_checkbox)

        layout.addWidget(quiz_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_spin_row(
        self,
        layout: QVBoxLayout,
        label_text: str,
        tooltip: str,
        minimum: int,
        maximum: int,
        value: int,
        suffix: str,
    ) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(label_text)
        label.setToolTip(tooltip)
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_settings(self) -> AppSettings:
        """Return the settings as edited in the dialog."""
        return AppSettings(
            default_time_limit=self.time_limit_spinbox.value(),
            auto_save=self.auto_save_checkbox.isChecked(),
            show_question_text=self.show_text_checkbox.isChecked(),
            ui_font_size=self.ui_font_spinbox.value(),
            game_font_size=self.game_font_spinbox.value(),
        )
