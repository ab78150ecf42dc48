"""Service for persisting the live session and the archive of past sessions."""

from __future__ import annotations

from datetime import datetime
import json
import logging

from pydantic import TypeAdapter, ValidationError

from hquiz.constants.quiz_constants import HISTORY_RETENTION
from hquiz.constants.storage_constants import CACHE_KEY_SESSION_PROGRESS, CACHE_KEY_SESSIONS_HISTORY
from hquiz.core.models import HistoryEntry, SessionProgress
from hquiz.core.services.local_cache import LocalCache

logger = logging.getLogger(__name__)

_HISTORY_ADAPTER = TypeAdapter(list[HistoryEntry])


class ProgressStore:
    """Loads and saves :class:`SessionProgress` and its bounded history.

    Every call goes straight to the cache, so a ``save`` is always visible to
    the next ``load``.
    """

    def __init__(self, cache: LocalCache, history_retention: int = HISTORY_RETENTION) -> None:
        if history_retention < 1:
            raise ValueError("History retention must keep at least one session.")
        self._cache = cache
        self._history_retention = history_retention

    def load(self) -> SessionProgress | None:
        raw = self._cache.get(CACHE_KEY_SESSION_PROGRESS)
        if raw is None:
            return None
        try:
            return SessionProgress.model_validate_json(raw)
        except ValidationError:
            logger.error("Discarding unreadable session progress", exc_info=True)
            return None

    def save(self, progress: SessionProgress) -> None:
        self._write(CACHE_KEY_SESSION_PROGRESS, progress.model_dump_json(by_alias=True, exclude_none=True))

    def clear(self) -> None:
        self._cache.remove(CACHE_KEY_SESSION_PROGRESS)

    def append_history(self, progress: SessionProgress, completed_at: datetime | None = None) -> HistoryEntry:
        """Archive a session snapshot, keeping only the most recent entries."""
        entry = HistoryEntry.from_progress(progress, completed_at)
        history = self.list_history()
        history.append(entry)
        history = history[-self._history_retention:]
        payload = _HISTORY_ADAPTER.dump_python(history, mode="json", by_alias=True, exclude_none=True)
        self._write(CACHE_KEY_SESSIONS_HISTORY, json.dumps(payload))
        logger.info("Archived session %s (%d in history)", entry.session_id, len(history))
        return entry

    def list_history(self) -> list[HistoryEntry]:
        """Return archived sessions, oldest first."""
        raw = self._cache.get(CACHE_KEY_SESSIONS_HISTORY)
        if raw is None:
            return []
        try:
            return _HISTORY_ADAPTER.validate_json(raw)
        except ValidationError:
            logger.error("Discarding unreadable session history", exc_info=True)
            return []

    def _write(self, key: str, value: str) -> None:
        # Cache implementations report failures as WriteFailedError.
        self._cache.set(key, value)
