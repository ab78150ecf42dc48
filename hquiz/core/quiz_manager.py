"""Business logic shared by the editor, the presenter and the File menu."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from hquiz.core.commands import CommandResult, CommandStatus, FileCommand
from hquiz.core.countdown import Countdown
from hquiz.core.errors import DocumentValidationError, HQuizError, StateViolation, WriteFailedError
from hquiz.core.models import HistoryEntry, Question, QuestionKind, Questionnaire
from hquiz.core.services.document_gateway import DocumentGateway
from hquiz.core.services.file_access import FileAccess
from hquiz.core.services.local_cache import LocalCache
from hquiz.core.services.presenter_session import PresenterSession
from hquiz.core.services.progress_store import ProgressStore
from hquiz.core.services.questionnaire_repository import QuestionnaireRepository
from hquiz.core.settings import AppSettings, load_settings, save_settings
from hquiz.core.validation import validate_questionnaire

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade for quiz services: Repository, DocumentGateway, ProgressStore and PresenterSession."""

    def __init__(self, cache: LocalCache, file_access: FileAccess) -> None:
        self._cache = cache
        self._settings = load_settings(cache)

        # Services
        self._repository = QuestionnaireRepository(self._settings.default_time_limit)
        self._gateway = DocumentGateway(cache, file_access)
        self._store = ProgressStore(cache)

        self.on_write_failed: Callable[[WriteFailedError], None] | None = None

    # --- Start-up & settings ---

    def restore_last_questionnaire(self) -> Questionnaire:
        """Reload the cached questionnaire, or start a new one when there is none."""
        cached = self._gateway.load_cached()
        if cached is not None:
            self._repository.replace(cached)
            logger.info("Restored questionnaire '%s' from the local cache", cached.title)
            return cached
        questionnaire = self._repository.new_questionnaire()
        self._gateway.new(questionnaire)
        return questionnaire

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def update_settings(self, settings: AppSettings) -> None:
        self._settings = settings
        self._repository.default_time_limit = settings.default_time_limit
        try:
            save_settings(self._cache, settings)
        except WriteFailedError as exc:
            self._report_write_failure(exc)

    # --- Document state ---

    @property
    def questionnaire(self) -> Questionnaire | None:
        return self._repository.questionnaire

    @property
    def active_path(self) -> Path | None:
        return self._gateway.active_path

    # --- File commands ---

    def handle_command(self, command: FileCommand, content: str | None = None) -> CommandResult:
        """Run a File menu command.

        ``content`` is only used by IMPORT: when given it is imported directly,
        otherwise the user is asked for a file.
        """
        handlers: dict[FileCommand, Callable[[], CommandResult]] = {
            FileCommand.NEW: self._handle_new,
            FileCommand.OPEN: self._handle_open,
            FileCommand.SAVE: self._handle_save,
            FileCommand.SAVE_AS: self._handle_save_as,
            FileCommand.IMPORT: lambda: self._handle_import(content),
            FileCommand.EXPORT: self._handle_export,
        }
        try:
            return handlers[command]()
        except HQuizError as exc:
            logger.warning("%s failed: %s", command.name, exc)
            return CommandResult(command, CommandStatus.FAILED, str(exc))

    def _handle_new(self) -> CommandResult:
        questionnaire = self._repository.new_questionnaire()
        self._gateway.new(questionnaire)
        return CommandResult(FileCommand.NEW, CommandStatus.OK, "Started a new questionnaire.")

    def _handle_open(self) -> CommandResult:
        opened = self._gateway.open()
        if opened is None:
            return CommandResult(FileCommand.OPEN, CommandStatus.CANCELED)
        self._repository.replace(opened.questionnaire)
        return CommandResult(
            FileCommand.OPEN,
            CommandStatus.OK,
            f"Opened '{opened.questionnaire.title}'.",
            opened.path,
        )

    def _handle_save(self) -> CommandResult:
        if self._gateway.active_path is None:
            result = self._handle_save_as()
            return CommandResult(FileCommand.SAVE, result.status, result.message, result.path)
        path = self._gateway.save(self._require_questionnaire())
        return CommandResult(FileCommand.SAVE, CommandStatus.OK, f"Saved to {path}.", path)

    def _handle_save_as(self) -> CommandResult:
        path = self._gateway.save_as(self._require_questionnaire())
        if path is None:
            return CommandResult(FileCommand.SAVE_AS, CommandStatus.CANCELED)
        return CommandResult(FileCommand.SAVE_AS, CommandStatus.OK, f"Saved to {path}.", path)

    def _handle_import(self, content: str | None) -> CommandResult:
        if content is None:
            content = self._gateway.read_import_file()
            if content is None:
                return CommandResult(FileCommand.IMPORT, CommandStatus.CANCELED)
        imported = self._gateway.prepare_import(content)
        # The editor adopts the import even when the bound file cannot be written.
        self._repository.replace(imported)
        try:
            self._gateway.save(imported)
        except WriteFailedError as exc:
            logger.warning("IMPORT could not be written: %s", exc)
            return CommandResult(
                FileCommand.IMPORT,
                CommandStatus.FAILED,
                f"Imported '{imported.title}' but could not write it: {exc}",
            )
        return CommandResult(
            FileCommand.IMPORT,
            CommandStatus.OK,
            f"Imported '{imported.title}' with {imported.question_count} questions.",
        )

    def _handle_export(self) -> CommandResult:
        path = self._gateway.export_to_file(self._require_questionnaire())
        if path is None:
            return CommandResult(FileCommand.EXPORT, CommandStatus.CANCELED)
        return CommandResult(FileCommand.EXPORT, CommandStatus.OK, f"Exported to {path}.", path)

    # --- Editing ---

    def update_details(self, *, title: str | None = None, description: str | None = None) -> Questionnaire:
        questionnaire = self._repository.update_details(title=title, description=description)
        self._after_edit()
        return questionnaire

    def add_question(self, kind: QuestionKind = QuestionKind.MULTIPLE_CHOICE) -> Question:
        question = self._repository.add_question(kind)
        self._after_edit()
        return question

    def update_question(self, question_id: str, **changes: Any) -> Question:
        question = self._repository.update_question(question_id, **changes)
        self._after_edit()
        return question

    def delete_question(self, question_id: str) -> None:
        self._repository.delete_question(question_id)
        self._after_edit()

    def move_question(self, question_id: str, offset: int) -> int:
        index = self._repository.move_question(question_id, offset)
        self._after_edit()
        return index

    def _after_edit(self) -> None:
        if not self._settings.auto_save:
            return
        try:
            self._gateway.save(self._require_questionnaire())
        except WriteFailedError as exc:
            self._report_write_failure(exc)

    # --- Presenting ---

    def begin_presenting(
        self,
        countdown: Countdown | None = None,
        *,
        on_change: Callable[[], None] | None = None,
        on_violation: Callable[[StateViolation], None] | None = None,
    ) -> PresenterSession:
        """Validate the questionnaire and open a presenter session for it.

        Raises:
            DocumentValidationError: if the questionnaire cannot be presented.
        """
        questionnaire = self._require_questionnaire()
        validate_questionnaire(questionnaire)
        if not questionnaire.questions:
            raise DocumentValidationError("The questionnaire has no questions to present.")
        return PresenterSession(
            questionnaire,
            self._store,
            countdown,
            on_change=on_change,
            on_violation=on_violation,
            on_write_failed=self._report_write_failure,
        )

    def list_history(self) -> list[HistoryEntry]:
        return self._store.list_history()

    # --- Internals ---

    def _require_questionnaire(self) -> Questionnaire:
        questionnaire = self._repository.questionnaire
        if questionnaire is None:
            raise DocumentValidationError("No questionnaire is loaded.")
        return questionnaire

    def _report_write_failure(self, exc: WriteFailedError) -> None:
        logger.warning("Write failed: %s", exc)
        if self.on_write_failed is not None:
            self.on_write_failed(exc)
