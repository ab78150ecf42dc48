"""Component for presenting a questionnaire live."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QCheckBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from hquiz.constants.quiz_constants import TIME_LIMIT_WARNING_SECONDS
from hquiz.constants.ui_constants import (
    NO_QUESTIONS_MESSAGE,
    OUTCOME_LABELS,
    PRESENTER_BACK_BUTTON,
    PRESENTER_CORRECT_BUTTON,
    PRESENTER_FALSE_BUTTON,
    PRESENTER_RESET_BUTTON,
    PRESENTER_SHOW_TEXT_TOGGLE,
    PRESENTER_TRUE_BUTTON,
    UNTITLED_QUESTION,
)
from hquiz.core.errors import DocumentValidationError, StateViolation
from hquiz.core.models import Outcome, QuestionKind
from hquiz.core.quiz_manager import QuizManager
from hquiz.core.services.presenter_session import PresenterSession, PresenterState
from hquiz.styling.styles import Styles
from hquiz.ui.dialog_helpers import confirm_reset_session, show_error
from hquiz.ui.qt_countdown import QtCountdown
from hquiz.ui.question_renderer import render_question

GRID_COLUMNS = 5
PROGRESS_RESOLUTION = 1000


def format_remaining(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class PresenterPanel(QWidget):
    """UI component for running a live session: question grid and question view."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        on_history_changed: Callable[[], None] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self.on_history_changed = on_history_changed
        self.session: PresenterSession | None = None

        self._game_font_size: int = quiz_manager.settings.game_font_size
        self._rendered_key: tuple[int, PresenterState] | None = None
        self._grid_buttons: list[QPushButton] = []
        self._countdown = QtCountdown(self)

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.pages = QStackedWidget(self)
        self.pages.addWidget(self._build_grid_page())
        self.pages.addWidget(self._build_question_page())
        layout.addWidget(self.pages, stretch=1)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

    def _build_grid_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        header_row = QHBoxLayout()
        self.progress_label = QLabel("", page)
        header_row.addWidget(self.progress_label)
        header_row.addStretch()

        self.show_text_checkbox = QCheckBox(PRESENTER_SHOW_TEXT_TOGGLE, page)
        self.show_text_checkbox.setChecked(self.quiz_manager.settings.show_question_text)
        self.show_text_checkbox.toggled.connect(self._handle_show_text_toggled)
        header_row.addWidget(self.show_text_checkbox)

        self.reset_button = QPushButton(PRESENTER_RESET_BUTTON, page)
        self.reset_button.clicked.connect(self._handle_reset)
        header_row.addWidget(self.reset_button)
        page_layout.addLayout(header_row)

        self.grid_layout = QGridLayout()
        page_layout.addLayout(self.grid_layout)
        page_layout.addStretch()
        return page

    def _build_question_page(self) -> QWidget:
        page = QWidget(self)
        page_layout = QVBoxLayout()
        page.setLayout(page_layout)

        # Timer row
        timer_row = QHBoxLayout()
        self.timer_label = QLabel("", page)
        timer_row.addWidget(self.timer_label)

        self.timer_progress = QProgressBar(page)
        self.timer_progress.setRange(0, PROGRESS_RESOLUTION)
        self.timer_progress.setTextVisible(False)
        timer_row.addWidget(self.timer_progress, stretch=1)
        page_layout.addLayout(timer_row)

        self.question_view = QWebEngineView(page)
        page_layout.addWidget(self.question_view, stretch=1)

        # Option buttons are rebuilt per question
        self.options_row = QHBoxLayout()
        page_layout.addLayout(self.options_row)
        self._option_buttons: list[QPushButton] = []

        judge_row = QHBoxLayout()
        self.back_button = QPushButton(PRESENTER_BACK_BUTTON, page)
        self.back_button.clicked.connect(self._handle_back)
        judge_row.addWidget(self.back_button)
        judge_row.addStretch()

        self.outcome_label = QLabel("", page)
        self.outcome_label.setAlignment(Qt.AlignCenter)
        judge_row.addWidget(self.outcome_label)
        judge_row.addStretch()

        self.correct_button = QPushButton(PRESENTER_CORRECT_BUTTON, page)
        self.correct_button.clicked.connect(self._handle_mark_correct)
        judge_row.addWidget(self.correct_button)

        self.wrong_button = QPushButton(PRESENTER_WRONG_BUTTON, page)
        self.wrong_button.clicked.connect(self._handle_mark_wrong)
        judge_row.addWidget(self.wrong_button)
        page_layout.addLayout(judge_row)
        return page

    # --- Session lifecycle ---

    def start(self) -> bool:
        """Open a presenter session for the current questionnaire."""
        self.stop()
        questionnaire = self.quiz_manager.questionnaire
        if questionnaire is None or not questionnaire.questions:
            show_error(self, "Cannot present", NO_QUESTIONS_MESSAGE)
            return False
        try:
            self.session = self.quiz_manager.begin_presenting(
                self._countdown,
                on_change=self._refresh,
                on_violation=self._handle_violation,
            )
        except DocumentValidationError as exc:
            show_error(self, "Cannot present", str(exc))
            return False

        self.title_label.setText(self.session.questionnaire.title)
        self._rebuild_grid()
        self._rendered_key = None
        self._refresh()
        return True

    def stop(self) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None
        self._rendered_key = None

    # --- Grid ---

    def _rebuild_grid(self) -> None:
        while self.grid_layout.count():
            item = self.grid_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._grid_buttons = []
        if self.session is None:
            return
        for idx in range(self.session.question_count):
            button = QPushButton(self)
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_start_question(i))
            row, column = divmod(idx, GRID_COLUMNS)
            self.grid_layout.addWidget(button, row, column)
            self._grid_buttons.append(button)

    def _update_grid(self) -> None:
        session = self.session
        if session is None:
            return
        show_text = self.show_text_checkbox.isChecked()
        for idx, button in enumerate(self._grid_buttons):
            question = session.questionnaire.questions[idx]
            label = str(idx + 1)
            if show_text:
                prompt = question.prompt.strip().splitlines()[0] if question.prompt.strip() else UNTITLED_QUESTION
                label = f"{label}. {prompt}"
            button.setText(label)
            result = session.question_result(idx)
            button.setEnabled(result is None)
            button.setStyleSheet(Styles.get_grid_tile_style(result, self._game_font_size))
        self.progress_label.setText(f"{session.answered_count} / {session.question_count} complete")

    # --- Question view ---

    def _rebuild_option_buttons(self) -> None:
        while self.options_row.count():
            item = self.options_row.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._option_buttons = []

        question = self.session.active_question if self.session else None
        if question is None or not question.kind.auto_evaluates:
            return
        if question.kind is QuestionKind.TRUE_FALSE:
            labels = [PRESENTER_TRUE_BUTTON, PRESENTER_FALSE_BUTTON]
        else:
            labels = [chr(ord("A") + idx) for idx in range(len(question.answers))]
        for idx, text in enumerate(labels):
            button = QPushButton(text, self)
            button.setStyleSheet(f"font-size: {self._game_font_size}pt; padding: 10px;")
            button.clicked.connect(lambda _checked=False, i=idx: self._handle_select_answer(i))
            self.options_row.addWidget(button)
            self._option_buttons.append(button)

    def _update_question_view(self) -> None:
        session = self.session
        question = session.active_question
        if question is None:
            return

        key = (session.current_question_index, session.state)
        if key != self._rendered_key:
            self._rendered_key = key
            judged = session.state is PresenterState.JUDGED
            self.question_view.setHtml(
                render_question(question, self._game_font_size, reveal_answer=judged)
            )
            if session.state is PresenterState.RUNNING:
                self._rebuild_option_buttons()

        running = session.state is PresenterState.RUNNING
        for button in (*self._option_buttons, self.correct_button, self.wrong_button):
            button.setEnabled(running)

        remaining = session.remaining_seconds
        fraction = remaining / question.time_limit if question.time_limit else 0.0
        self.timer_progress.setValue(int(fraction * PROGRESS_RESOLUTION))
        self.timer_label.setText(format_remaining(remaining))
        warning = running and remaining <= TIME_LIMIT_WARNING_SECONDS
        self.timer_label.setStyleSheet(
            Styles.get_timer_style(self._game_font_size, warning, blink_state=remaining % 2 == 0)
        )

        outcome = session.last_outcome
        if outcome is None:
            self.outcome_label.setText("")
        else:
            self.outcome_label.setText(OUTCOME_LABELS[outcome.value])
            self.outcome_label.setStyleSheet(
                Styles.get_outcome_style(outcome is Outcome.CORRECT, self._game_font_size)
            )

    def _refresh(self) -> None:
        session = self.session
        if session is None:
            return
        if session.state is PresenterState.IDLE:
            self._rendered_key = None
            self.pages.setCurrentIndex(0)
            self._update_grid()
        else:
            self.pages.setCurrentIndex(1)
            self._update_question_view()

    # --- Handlers ---

    def _handle_start_question(self, index: int) -> None:
        if self.session is not None and self.session.start_question(index):
            self.status_label.setText("")

    def _handle_select_answer(self, option_index: int) -> None:
        if self.session is not None:
            self.session.select_answer(option_index)

    def _handle_mark_correct(self) -> None:
        if self.session is not None:
            self.session.mark_correct()

    def _handle_mark_wrong(self) -> None:
        if self.session is not None:
            self.session.mark_wrong()

    def _handle_back(self) -> None:
        if self.session is not None:
            self.session.return_to_grid()

    def _handle_reset(self) -> None:
        session = self.session
        if session is None:
            return
        if session.answered_count and not confirm_reset_session(self, session.answered_count):
            return
        session.reset_session()
        if self.on_history_changed is not None:
            self.on_history_changed()

    def _handle_show_text_toggled(self, _checked: bool) -> None:
        self._update_grid()

    def _handle_violation(self, violation: StateViolation) -> None:
        self.status_label.setText(violation.detail)

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self.progress_label.setStyleSheet(f"font-size: {font_size}pt;")
        for button in (self.back_button, self.correct_button, self.wrong_button, self.reset_button):
            button.setStyleSheet(f"font-size: {font_size}pt;")
        self._rendered_key = None
        self._refresh()
