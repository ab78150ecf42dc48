"""Qt main window with the editor, presenter and history modes."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from hquiz.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from hquiz.constants.ui_constants import (
    EXPORT_DIALOG_TITLE,
    IMPORT_DIALOG_TITLE,
    MENU_EXPORT,
    MENU_FILE,
    MENU_IMPORT,
    MENU_NEW,
    MENU_OPEN,
    MENU_SAVE,
    MENU_SAVE_AS,
    MODE_BUTTON_EDITOR,
    MODE_BUTTON_HISTORY,
    MODE_BUTTON_PRESENTER,
    OPEN_DIALOG_TITLE,
    SAVE_AS_DIALOG_TITLE,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from hquiz.core.commands import CommandResult, FileCommand
from hquiz.core.errors import WriteFailedError
from hquiz.core.quiz_manager import QuizManager
from hquiz.styling.styles import Styles
from hquiz.ui.components.editor_panel import EditorPanel
from hquiz.ui.components.history_panel import HistoryPanel
from hquiz.ui.components.presenter_panel import PresenterPanel
from hquiz.ui.dialog_helpers import confirm_new_questionnaire, show_command_result, show_info, show_warning
from hquiz.ui.qt_file_access import QtFileAccess
from hquiz.ui.settings_dialog import SettingsDialog

COMMAND_TITLES: dict[FileCommand, str] = {
    FileCommand.NEW: "New questionnaire",
    FileCommand.OPEN: "Open",
    FileCommand.SAVE: "Save",
    FileCommand.SAVE_AS: "Save As",
    FileCommand.IMPORT: "Import",
    FileCommand.EXPORT: "Export",
}

# Commands after which the editor shows a different questionnaire
REPLACING_COMMANDS = (FileCommand.NEW, FileCommand.OPEN, FileCommand.IMPORT)


class AppMode(Enum):
    """High-level UI mode of the main window."""

    EDITOR = auto()
    PRESENTER = auto()
    HISTORY = auto()


class MainWindow(QMainWindow):
    """Main Qt window orchestrating the three application modes."""

    def __init__(self, quiz_manager: QuizManager, file_access: QtFileAccess) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.quiz_manager = quiz_manager
        self.file_access = file_access
        self.file_access.parent = self
        self.quiz_manager.on_write_failed = self._handle_write_failed

        self._mode = AppMode.EDITOR

        self._build_menu()
        self._build_ui()
        self._apply_styles()
        self.editor_panel.refresh()

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu(MENU_FILE)
        entries = (
            (MENU_NEW, FileCommand.NEW, "Ctrl+N"),
            (MENU_OPEN, FileCommand.OPEN, "Ctrl+O"),
            (MENU_SAVE, FileCommand.SAVE, "Ctrl+S"),
            (MENU_SAVE_AS, FileCommand.SAVE_AS, "Ctrl+Shift+S"),
            (MENU_IMPORT, FileCommand.IMPORT, None),
            (MENU_EXPORT, FileCommand.EXPORT, None),
        )
        self.file_actions = {}
        for text, command, shortcut in entries:
            if command is FileCommand.IMPORT:
                file_menu.addSeparator()
            action = file_menu.addAction(text)
            if shortcut:
                action.setShortcut(shortcut)
            action.triggered.connect(lambda _checked=False, c=command: self._handle_file_command(c))
            self.file_actions[command] = action

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)

        self.editor_panel = EditorPanel(self.quiz_manager, self)
        self.presenter_panel = PresenterPanel(
            self.quiz_manager,
            on_history_changed=self._handle_history_changed,
            parent=self,
        )
        self.history_panel = HistoryPanel(self.quiz_manager, self)

        self.mode_stack.addWidget(self.editor_panel)
        self.mode_stack.addWidget(self.presenter_panel)
        self.mode_stack.addWidget(self.history_panel)

        root_layout.addWidget(self.mode_stack)

        self._set_mode(AppMode.EDITOR)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.editor_mode_button = QPushButton(MODE_BUTTON_EDITOR, self)
        self.editor_mode_button.setCheckable(True)
        self.editor_mode_button.clicked.connect(lambda: self._switch_mode(AppMode.EDITOR))
        button_row.addWidget(self.editor_mode_button)

        self.presenter_mode_button = QPushButton(MODE_BUTTON_PRESENTER, self)
        self.presenter_mode_button.setCheckable(True)
        self.presenter_mode_button.clicked.connect(lambda: self._switch_mode(AppMode.PRESENTER))
        button_row.addWidget(self.presenter_mode_button)

        self.history_mode_button = QPushButton(MODE_BUTTON_HISTORY, self)
        self.history_mode_button.setCheckable(True)
        self.history_mode_button.clicked.connect(lambda: self._switch_mode(AppMode.HISTORY))
        button_row.addWidget(self.history_mode_button)

        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    # --- Modes ---

    def _switch_mode(self, mode: AppMode) -> None:
        if mode is self._mode:
            self._set_mode(mode)
            return
        if self._mode is AppMode.PRESENTER:
            self.presenter_panel.stop()

        if mode is AppMode.PRESENTER and not self.presenter_panel.start():
            self._set_mode(self._mode)
            return
        if mode is AppMode.EDITOR:
            self.editor_panel.refresh()
        elif mode is AppMode.HISTORY:
            self.history_panel.refresh()
        self._set_mode(mode)

    def _set_mode(self, mode: AppMode) -> None:
        self._mode = mode
        self.editor_mode_button.setChecked(mode is AppMode.EDITOR)
        self.presenter_mode_button.setChecked(mode is AppMode.PRESENTER)
        self.history_mode_button.setChecked(mode is AppMode.HISTORY)

        index_map = {
            AppMode.EDITOR: 0,
            AppMode.PRESENTER: 1,
            AppMode.HISTORY: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- File menu ---

    def _handle_file_command(self, command: FileCommand) -> None:
        if command is FileCommand.NEW and not confirm_new_questionnaire(self):
            return

        self.file_access.open_title = IMPORT_DIALOG_TITLE if command is FileCommand.IMPORT else OPEN_DIALOG_TITLE
        self.file_access.save_title = EXPORT_DIALOG_TITLE if command is FileCommand.EXPORT else SAVE_AS_DIALOG_TITLE

        before = self.quiz_manager.questionnaire
        result: CommandResult = self.quiz_manager.handle_command(command)
        show_command_result(self, COMMAND_TITLES[command], result)

        replaced = self.quiz_manager.questionnaire is not before
        if not result.ok and not replaced:
            return
        if command in REPLACING_COMMANDS:
            self._switch_mode(AppMode.EDITOR)
        self.editor_panel.refresh()

    # --- Callbacks ---

    def _handle_write_failed(self, exc: WriteFailedError) -> None:
        show_warning(self, "Could not save", str(exc))

    def _handle_history_changed(self) -> None:
        self.history_panel.refresh()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self.quiz_manager.settings, self)
        if dialog.exec():
            self.quiz_manager.update_settings(dialog.get_settings())
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        settings = self.quiz_manager.settings

        # Apply UI font size to main buttons
        ui_style = f"font-size: {settings.ui_font_size}pt;"
        buttons = [
            self.editor_mode_button,
            self.presenter_mode_button,
            self.history_mode_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        # Pass settings to components
        self.editor_panel.apply_font_size(settings.ui_font_size)
        self.presenter_panel.apply_font_size(settings.game_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.presenter_panel.stop()
        super().closeEvent(event)
