"""Component for authoring a questionnaire."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from hquiz.constants.quiz_constants import (
    MAX_TIME_LIMIT_SECONDS,
    MIN_TIME_LIMIT_SECONDS,
    NEW_QUESTION_ANSWER_SLOTS,
)
from hquiz.constants.ui_constants import (
    EDITOR_ADD_BUTTON,
    EDITOR_DELETE_BUTTON,
    EDITOR_DOWN_BUTTON,
    EDITOR_UP_BUTTON,
    KIND_LABELS,
    PLACEHOLDER_QUESTION,
    UNTITLED_QUESTION,
)
from hquiz.core.errors import DocumentValidationError
from hquiz.core.models import Question, QuestionKind
from hquiz.core.quiz_manager import QuizManager
from hquiz.core.validation import validate_questionnaire
from hquiz.ui.dialog_helpers import confirm_delete_question
from hquiz.ui.question_renderer import render_question


class EditorPanel(QWidget):
    """UI component for editing questionnaire details and questions.

    Every field change is pushed to the manager immediately; there is no
    separate "save question" step.
    """

    def __init__(self, quiz_manager: QuizManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.quiz_manager = quiz_manager
        self._selected_question_id: str | None = None
        self._populating: bool = False

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Questionnaire details
        self.title_input = QLineEdit(self)
        self.title_input.setPlaceholderText("Title")
        self.title_input.textEdited.connect(self._handle_title_edited)
        layout.addWidget(self.title_input)

        self.description_input = QLineEdit(self)
        self.description_input.setPlaceholderText("Description (optional)")
        self.description_input.textEdited.connect(self._handle_description_edited)
        layout.addWidget(self.description_input)

        body_row = QHBoxLayout()
        layout.addLayout(body_row, stretch=1)

        # Question list and list actions
        list_column = QVBoxLayout()
        self.question_list = QListWidget(self)
        self.question_list.currentItemChanged.connect(self._handle_selection_changed)
        list_column.addWidget(self.question_list, stretch=1)

        list_buttons = QHBoxLayout()
        self.add_button = QPushButton(EDITOR_ADD_BUTTON, self)
        self.add_button.clicked.connect(self._handle_add_question)
        list_buttons.addWidget(self.add_button)

        self.delete_button = QPushButton(EDITOR_DELETE_BUTTON, self)
        self.delete_button.clicked.connect(self._handle_delete_question)
        list_buttons.addWidget(self.delete_button)
        list_column.addLayout(list_buttons)

        move_buttons = QHBoxLayout()
        self.up_button = QPushButton(EDITOR_UP_BUTTON, self)
        self.up_button.clicked.connect(lambda: self._handle_move(-1))
        move_buttons.addWidget(self.up_button)

        self.down_button = QPushButton(EDITOR_DOWN_BUTTON, self)
        self.down_button.clicked.connect(lambda: self._handle_move(1))
        move_buttons.addWidget(self.down_button)
        list_column.addLayout(move_buttons)

        body_row.addLayout(list_column, stretch=1)

        # Question editor
        editor_column = QVBoxLayout()

        settings_row = QHBoxLayout()
        settings_row.addWidget(QLabel("Type:", self))
        self.kind_combo = QComboBox(self)
        for kind in QuestionKind:
            self.kind_combo.addItem(KIND_LABELS[kind.value], userData=kind.value)
        self.kind_combo.currentIndexChanged.connect(self._handle_kind_changed)
        settings_row.addWidget(self.kind_combo)

        settings_row.addWidget(QLabel("Time limit:", self))
        self.time_limit_spinbox = QSpinBox(self)
        self.time_limit_spinbox.setRange(MIN_TIME_LIMIT_SECONDS, MAX_TIME_LIMIT_SECONDS)
        self.time_limit_spinbox.setSingleStep(5)
        self.time_limit_spinbox.setSuffix(" s")
        self.time_limit_spinbox.valueChanged.connect(self._handle_time_limit_changed)
        settings_row.addWidget(self.time_limit_spinbox)

        settings_row.addWidget(QLabel("Correct answer:", self))
        self.correct_combo = QComboBox(self)
        self.correct_combo.currentIndexChanged.connect(self._handle_correct_changed)
        settings_row.addWidget(self.correct_combo)
        editor_column.addLayout(settings_row)

        self.prompt_input = QPlainTextEdit(self)
        self.prompt_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.prompt_input.textChanged.connect(self._handle_prompt_changed)
        editor_column.addWidget(self.prompt_input)

        self.image_input = QLineEdit(self)
        self.image_input.setPlaceholderText("Image file path or data URI (optional)")
        self.image_input.textEdited.connect(self._handle_image_edited)
        editor_column.addWidget(self.image_input)

        self.answer_inputs: list[QLineEdit] = []
        answers_row = QHBoxLayout()
        for idx in range(NEW_QUESTION_ANSWER_SLOTS):
            answer_input = QLineEdit(self)
            answer_input.setPlaceholderText(f"Answer {chr(ord('A') + idx)}")
            answer_input.textEdited.connect(self._handle_answers_edited)
            answers_row.addWidget(answer_input)
            self.answer_inputs.append(answer_input)
        editor_column.addLayout(answers_row)

        self.preview_view = QWebEngineView(self)
        editor_column.addWidget(self.preview_view, stretch=1)

        body_row.addLayout(editor_column, stretch=3)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

    # --- Public API ---

    def refresh(self) -> None:
        """Reload every field from the manager's current questionnaire."""
        questionnaire = self.quiz_manager.questionnaire
        self._populating = True
        try:
            self.title_input.setText(questionnaire.title if questionnaire else "")
            self.description_input.setText((questionnaire.description or "") if questionnaire else "")
            self._rebuild_question_list()
        finally:
            self._populating = False
        self._populate_question_fields()
        self._update_status()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (self.add_button, self.delete_button, self.up_button, self.down_button):
            button.setStyleSheet(style)

    # --- List handling ---

    def _rebuild_question_list(self) -> None:
        questionnaire = self.quiz_manager.questionnaire
        self.question_list.clear()
        if questionnaire is None:
            return
        selected_row = -1
        for idx, question in enumerate(questionnaire.questions):
            item = QListWidgetItem(self._list_label(idx, question))
            item.setData(Qt.UserRole, question.id)
            self.question_list.addItem(item)
            if question.id == self._selected_question_id:
                selected_row = idx
        if selected_row == -1 and questionnaire.questions:
            selected_row = 0
        self._selected_question_id = (
            questionnaire.questions[selected_row].id if selected_row >= 0 else None
        )
        self.question_list.setCurrentRow(selected_row)

    @staticmethod
    def _list_label(index: int, question: Question) -> str:
        prompt = question.prompt.strip().splitlines()[0] if question.prompt.strip() else UNTITLED_QUESTION
        return f"{index + 1}. {prompt} ({question.time_limit}s)"

    def _handle_selection_changed(self, current: QListWidgetItem | None, _previous) -> None:
        if self._populating:
            return
        self._selected_question_id = current.data(Qt.UserRole) if current is not None else None
        self._populate_question_fields()

    def _selected_question(self) -> Question | None:
        questionnaire = self.quiz_manager.questionnaire
        if questionnaire is None or self._selected_question_id is None:
            return None
        for question in questionnaire.questions:
            if question.id == self._selected_question_id:
                return question
        return None

    def _populate_question_fields(self) -> None:
        question = self._selected_question()
        self._populating = True
        try:
            enabled = question is not None
            for widget in (
                self.kind_combo,
                self.time_limit_spinbox,
                self.correct_combo,
                self.prompt_input,
                self.image_input,
                self.delete_button,
                self.up_button,
                self.down_button,
                *self.answer_inputs,
            ):
                widget.setEnabled(enabled)
            if question is None:
                self.prompt_input.clear()
                self.image_input.clear()
                for answer_input in self.answer_inputs:
                    answer_input.clear()
                self.correct_combo.clear()
                self.preview_view.setHtml("")
                return

            self.kind_combo.setCurrentIndex(self.kind_combo.findData(question.kind.value))
            self.time_limit_spinbox.setValue(question.time_limit)
            if self.prompt_input.toPlainText() != question.prompt:
                self.prompt_input.setPlainText(question.prompt)
            self.image_input.setText(question.image or "")
            self._populate_answers(question)
        finally:
            self._populating = False
        self._refresh_preview(question)

    def _populate_answers(self, question: Question) -> None:
        editable = question.kind in (QuestionKind.MULTIPLE_CHOICE, QuestionKind.IMAGE_CHOICE)
        for idx, answer_input in enumerate(self.answer_inputs):
            answer_input.setText(question.answers[idx] if idx < len(question.answers) else "")
            answer_input.setEnabled(editable)
            answer_input.setVisible(question.kind is not QuestionKind.FREE_TEXT)

        self.correct_combo.clear()
        self.correct_combo.setEnabled(question.kind is not QuestionKind.FREE_TEXT)
        for idx, answer in enumerate(question.answers):
            self.correct_combo.addItem(f"{chr(ord('A') + idx)}: {answer}", userData=idx)
        if 0 <= question.correct_answer < len(question.answers):
            self.correct_combo.setCurrentIndex(question.correct_answer)

    # --- Field handlers ---

    def _handle_title_edited(self, text: str) -> None:
        self.quiz_manager.update_details(title=text)
        self._update_status()

    def _handle_description_edited(self, text: str) -> None:
        self.quiz_manager.update_details(description=text)

    def _handle_add_question(self) -> None:
        if self.quiz_manager.questionnaire is None:
            return
        question = self.quiz_manager.add_question()
        self._selected_question_id = question.id
        self.refresh()

    def _handle_delete_question(self) -> None:
        question = self._selected_question()
        if question is None:
            return
        number = self.quiz_manager.questionnaire.index_of(question.id) + 1
        if not confirm_delete_question(self, number):
            return
        self.quiz_manager.delete_question(question.id)
        self._selected_question_id = None
        self.refresh()

    def _handle_move(self, offset: int) -> None:
        question = self._selected_question()
        if question is None:
            return
        self.quiz_manager.move_question(question.id, offset)
        self.refresh()

    def _handle_kind_changed(self) -> None:
        value = self.kind_combo.currentData()
        if value is not None:
            self._update_selected(kind=QuestionKind(value), rebuild=True)

    def _handle_time_limit_changed(self, value: int) -> None:
        self._update_selected(time_limit=value, rebuild=True)

    def _handle_correct_changed(self) -> None:
        index = self.correct_combo.currentData()
        if index is not None:
            self._update_selected(correct_answer=int(index))

    def _handle_prompt_changed(self) -> None:
        self._update_selected(prompt=self.prompt_input.toPlainText(), rebuild=True)

    def _handle_image_edited(self, text: str) -> None:
        self._update_selected(image=text.strip() or None)

    def _handle_answers_edited(self) -> None:
        self._update_selected(answers=[field.text() for field in self.answer_inputs], refill_correct=True)

    def _update_selected(self, *, rebuild: bool = False, refill_correct: bool = False, **changes) -> None:
        if self._populating:
            return
        question = self._selected_question()
        if question is None:
            return
        updated = self.quiz_manager.update_question(question.id, **changes)
        if rebuild:
            self._rebuild_labels()
            if "kind" in changes:
                self._populate_question_fields()
        if refill_correct:
            self._populating = True
            try:
                for idx, answer in enumerate(updated.answers):
                    if idx < self.correct_combo.count():
                        self.correct_combo.setItemText(idx, f"{chr(ord('A') + idx)}: {answer}")
            finally:
                self._populating = False
        self._refresh_preview(updated)
        self._update_status()

    def _rebuild_labels(self) -> None:
        questionnaire = self.quiz_manager.questionnaire
        if questionnaire is None:
            return
        for idx, question in enumerate(questionnaire.questions):
            item = self.question_list.item(idx)
            if item is not None:
                item.setText(self._list_label(idx, question))

    def _refresh_preview(self, question: Question) -> None:
        self.preview_view.setHtml(render_question(question, reveal_answer=True))

    def _update_status(self) -> None:
        questionnaire = self.quiz_manager.questionnaire
        if questionnaire is None:
            self.status_label.setText("No questionnaire loaded.")
            return
        path = self.quiz_manager.active_path
        location = str(path) if path else "not saved to a file"
        try:
            validate_questionnaire(questionnaire)
            problem = ""
        except DocumentValidationError as exc:
            problem = f" | {exc}"
        self.status_label.setText(
            f"{questionnaire.question_count} question(s) | {location}{problem}"
        )
