import pytest

from hquiz.core.errors import WriteFailedError
from hquiz.core.models import QuestionProgress, SessionProgress
from hquiz.core.quiz_exporter import serialize_questionnaire
from hquiz.core.quiz_importer import parse_questionnaire
from hquiz.core.services.local_cache import SettingsCache
from hquiz.core.services.progress_store import ProgressStore


@pytest.fixture
def cache_path(tmp_path):
    return str(tmp_path / "cache.ini")


def test_value_is_visible_to_a_second_instance(cache_path):
    SettingsCache(cache_path).set("greeting", "hello")
    assert SettingsCache(cache_path).get("greeting") == "hello"


def test_missing_key_is_none(cache_path):
    assert SettingsCache(cache_path).get("missing") is None


def test_remove(cache_path):
    cache = SettingsCache(cache_path)
    cache.set("greeting", "hello")
    cache.remove("greeting")
    assert cache.get("greeting") is None
    assert SettingsCache(cache_path).get("greeting") is None


def test_questionnaire_json_is_stored_losslessly(cache_path, questionnaire):
    content = serialize_questionnaire(questionnaire)
    SettingsCache(cache_path).set("document", content)

    stored = SettingsCache(cache_path).get("document")
    assert stored == content
    assert parse_questionnaire(stored) == questionnaire


def test_progress_and_history_survive_a_restart(cache_path, questionnaire):
    progress = SessionProgress.for_questionnaire(questionnaire)
    progress.questions[0] = QuestionProgress(question_id="q1", answered=True, correct=True, time_spent=12)
    progress.current_question_index = 0

    store = ProgressStore(SettingsCache(cache_path))
    store.save(progress)
    store.append_history(progress)

    reopened = ProgressStore(SettingsCache(cache_path))
    assert reopened.load() == progress
    history = reopened.list_history()
    assert len(history) == 1
    assert history[0].to_progress() == progress


def test_clear_survives_a_restart(cache_path, questionnaire):
    store = ProgressStore(SettingsCache(cache_path))
    store.save(SessionProgress.for_questionnaire(questionnaire))
    store.clear()
    assert ProgressStore(SettingsCache(cache_path)).load() is None


def test_unwritable_location_raises_write_failed(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    cache = SettingsCache(str(blocker / "cache.ini"))

    with pytest.raises(WriteFailedError):
        cache.set("greeting", "hello")
