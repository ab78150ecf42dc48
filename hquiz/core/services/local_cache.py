"""Key-value storage that backs the questionnaire copy, session progress and history."""

from __future__ import annotations

from PySide6.QtCore import QSettings

from hquiz.constants.storage_constants import CACHE_APPLICATION, CACHE_ORGANIZATION
from hquiz.core.errors import WriteFailedError


class LocalCache:
    """Synchronous string store addressed by fixed keys."""

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryCache(LocalCache):
    """Process-local cache. Nothing survives a restart."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._values)


class SettingsCache(LocalCache):
    """Cache persisted through ``QSettings``.

    Without a file path the platform's native settings store is used under the
    HQuiz organization/application names; with one, an INI file at that path.
    """

    def __init__(self, file_path: str | None = None) -> None:
        if file_path is None:
            self._settings = QSettings(CACHE_ORGANIZATION, CACHE_APPLICATION)
        else:
            self._settings = QSettings(file_path, QSettings.Format.IniFormat)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync()

    def _sync(self) -> None:
        self._settings.sync()
        if self._settings.status() != QSettings.Status.NoError:
            raise WriteFailedError(f"Could not write settings to {self._settings.fileName()}.")
