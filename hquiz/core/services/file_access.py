"""File dialog and file I/O collaborator used by the document gateway."""

from __future__ import annotations

from pathlib import Path

from hquiz.constants.storage_constants import DOCUMENT_ENCODING
from hquiz.core.errors import DocumentReadError, WriteFailedError


class FileAccess:
    """Lets the user pick files and reads or writes their text.

    Subclasses provide the two dialogs; returning ``None`` from either means
    the user canceled.
    """

    def open_file(self, file_filter: str) -> Path | None:
        raise NotImplementedError

    def save_file_as(self, default_name: str, file_filter: str) -> Path | None:
        raise NotImplementedError

    def read_file(self, file_path: Path) -> str:
        try:
            return file_path.read_text(encoding=DOCUMENT_ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentReadError(f"Could not read {file_path}: {exc}") from exc

    def write_file(self, file_path: Path, content: str) -> None:
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding=DOCUMENT_ENCODING)
        except OSError as exc:
            raise WriteFailedError(f"Could not write {file_path}: {exc}") from exc
