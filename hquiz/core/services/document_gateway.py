"""Keeps the questionnaire document in sync between its file and the local cache.

The cache always holds a copy of the latest questionnaire so the application
can reopen it on start-up. When the user has bound the questionnaire to a file
(open or save-as), that file is the authoritative copy and the cache is only a
backup.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from hquiz.constants.storage_constants import CACHE_KEY_QUESTIONNAIRE, DOCUMENT_FILE_FILTER
from hquiz.core.errors import DocumentValidationError, WriteFailedError
from hquiz.core.models import Questionnaire, utc_now
from hquiz.core.quiz_exporter import serialize_questionnaire, suggested_filename
from hquiz.core.quiz_importer import parse_questionnaire
from hquiz.core.services.file_access import FileAccess
from hquiz.core.services.local_cache import LocalCache

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OpenedDocument:
    questionnaire: Questionnaire
    path: Path


@dataclass(slots=True)
class ExportedDocument:
    filename: str
    content: str


class DocumentGateway:
    """Open/save/import/export operations for questionnaire documents."""

    def __init__(self, cache: LocalCache, file_access: FileAccess) -> None:
        self._cache = cache
        self._file_access = file_access
        self._active_path: Path | None = None

    @property
    def active_path(self) -> Path | None:
        return self._active_path

    def load_cached(self) -> Questionnaire | None:
        """Return the questionnaire kept in the cache, if it is still readable."""
        raw = self._cache.get(CACHE_KEY_QUESTIONNAIRE)
        if raw is None:
            return None
        try:
            return parse_questionnaire(raw)
        except DocumentValidationError:
            logger.error("Ignoring unreadable cached questionnaire", exc_info=True)
            return None

    def new(self, questionnaire: Questionnaire) -> None:
        """Start a new, unsaved document. The previous file binding is dropped."""
        self._active_path = None
        self._write_cache(questionnaire)

    def open(self) -> OpenedDocument | None:
        """Let the user pick a questionnaire file.

        Returns ``None`` when the dialog is canceled. Read and parse failures
        raise and leave the active path and the cache untouched.
        """
        file_path = self._file_access.open_file(DOCUMENT_FILE_FILTER)
        if file_path is None:
            return None

        content = self._file_access.read_file(file_path)
        questionnaire = parse_questionnaire(content)

        self._active_path = file_path
        self._write_cache(questionnaire)
        logger.info("Opened questionnaire '%s' from %s", questionnaire.title, file_path)
        return OpenedDocument(questionnaire=questionnaire, path=file_path)

    def save(self, questionnaire: Questionnaire) -> Path | None:
        """Write the cache copy and, when bound to a file, the file itself.

        Returns the path written, or ``None`` when no file is bound.

        Raises:
            WriteFailedError: if the bound file could not be written.
        """
        self._write_cache(questionnaire)
        if self._active_path is None:
            return None
        self._file_access.write_file(self._active_path, serialize_questionnaire(questionnaire))
        return self._active_path

    def save_as(self, questionnaire: Questionnaire) -> Path | None:
        """Ask for a new file, write it and bind the questionnaire to it.

        Returns ``None`` when the dialog is canceled; nothing changes then.
        """
        file_path = self._file_access.save_file_as(
            suggested_filename(questionnaire.title), DOCUMENT_FILE_FILTER
        )
        if file_path is None:
            return None

        self._file_access.write_file(file_path, serialize_questionnaire(questionnaire))
        self._active_path = file_path
        self._write_cache(questionnaire)
        logger.info("Saved questionnaire '%s' to %s", questionnaire.title, file_path)
        return file_path

    def prepare_import(self, content: str) -> Questionnaire:
        """Parse questionnaire JSON text and stamp it as freshly edited.

        Nothing is written; malformed content raises ``DocumentValidationError``.
        """
        parsed = parse_questionnaire(content)
        return parsed.model_copy(update={"updated_at": utc_now()})

    def read_import_file(self) -> str | None:
        """Let the user pick a file to import and return its text."""
        file_path = self._file_access.open_file(DOCUMENT_FILE_FILTER)
        if file_path is None:
            return None
        return self._file_access.read_file(file_path)

    def import_document(self, content: str) -> Questionnaire:
        """Adopt questionnaire JSON text as the current document.

        The imported questionnaire gets a fresh ``updated_at`` and is saved
        like any edit. Malformed content raises ``DocumentValidationError``
        before anything is written.
        """
        questionnaire = self.prepare_import(content)
        self.save(questionnaire)
        return questionnaire

    def import_from_file(self) -> Questionnaire | None:
        """Let the user pick a file and import its content.

        Unlike :meth:`open`, the file does not become the active path.
        """
        content = self.read_import_file()
        if content is None:
            return None
        return self.import_document(content)

    def export(self, questionnaire: Questionnaire) -> ExportedDocument:
        """Serialized copy for the user to take away. No state changes."""
        return ExportedDocument(
            filename=suggested_filename(questionnaire.title),
            content=serialize_questionnaire(questionnaire),
        )

    def export_to_file(self, questionnaire: Questionnaire) -> Path | None:
        """Write an exported copy to a user-chosen file without rebinding."""
        exported = self.export(questionnaire)
        file_path = self._file_access.save_file_as(exported.filename, DOCUMENT_FILE_FILTER)
        if file_path is None:
            return None
        self._file_access.write_file(file_path, exported.content)
        return file_path

    def _write_cache(self, questionnaire: Questionnaire) -> None:
        try:
            self._cache.set(CACHE_KEY_QUESTIONNAIRE, serialize_questionnaire(questionnaire))
        except WriteFailedError:
            # Best effort only; file writes report their own failures.
            logger.warning("Could not back up questionnaire to the local cache", exc_info=True)
