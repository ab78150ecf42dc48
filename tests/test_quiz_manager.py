import json

import pytest

from hquiz.constants.storage_constants import CACHE_KEY_QUESTIONNAIRE, CACHE_KEY_SETTINGS
from hquiz.core.commands import CommandStatus, FileCommand
from hquiz.core.errors import DocumentValidationError, WriteFailedError
from hquiz.core.models import QuestionKind
from hquiz.core.quiz_exporter import serialize_questionnaire
from hquiz.core.quiz_importer import parse_questionnaire
from hquiz.core.quiz_manager import QuizManager
from hquiz.core.services.local_cache import MemoryCache
from hquiz.core.services.presenter_session import PresenterState
from hquiz.core.settings import AppSettings


@pytest.fixture
def manager(cache, file_access):
    manager = QuizManager(cache, file_access)
    manager.restore_last_questionnaire()
    return manager


def test_restore_creates_new_questionnaire_when_cache_is_empty(cache, manager):
    assert manager.questionnaire.title == "New Questionnaire"
    assert parse_questionnaire(cache.get(CACHE_KEY_QUESTIONNAIRE)).id == manager.questionnaire.id


def test_restore_reuses_cached_questionnaire(cache, file_access, questionnaire):
    cache.set(CACHE_KEY_QUESTIONNAIRE, serialize_questionnaire(questionnaire))
    manager = QuizManager(cache, file_access)
    assert manager.restore_last_questionnaire() == questionnaire
    assert manager.questionnaire == questionnaire


def test_edits_are_autosaved_to_cache(cache, manager):
    question = manager.add_question(QuestionKind.FREE_TEXT)
    manager.update_question(question.id, prompt="Explain gravity")

    cached = parse_questionnaire(cache.get(CACHE_KEY_QUESTIONNAIRE))
    assert cached.questions[0].prompt == "Explain gravity"


def test_autosave_can_be_disabled(cache, manager):
    before = cache.get(CACHE_KEY_QUESTIONNAIRE)
    manager.update_settings(AppSettings(auto_save=False))
    manager.update_details(title="Not saved")
    assert cache.get(CACHE_KEY_QUESTIONNAIRE) == before


def test_update_settings_persists_and_applies_time_limit(cache, file_access, manager):
    manager.update_settings(AppSettings(default_time_limit=90))
    assert json.loads(cache.get(CACHE_KEY_SETTINGS))["defaultTimeLimit"] == 90
    assert manager.add_question().time_limit == 90
    assert QuizManager(cache, file_access).settings.default_time_limit == 90


def test_new_command_replaces_questionnaire(manager):
    old_id = manager.questionnaire.id
    result = manager.handle_command(FileCommand.NEW)
    assert result.ok
    assert manager.questionnaire.id != old_id
    assert manager.active_path is None


def test_save_without_path_falls_through_to_save_as(manager, file_access, tmp_path):
    target = tmp_path / "draft.json"
    file_access.save_answer = target

    result = manager.handle_command(FileCommand.SAVE)
    assert result.command is FileCommand.SAVE
    assert result.ok
    assert result.path == target
    assert manager.active_path == target
    assert file_access.offered_names == ["new_questionnaire_questionnaire.json"]


def test_canceled_save_as(manager):
    result = manager.handle_command(FileCommand.SAVE_AS)
    assert result.status is CommandStatus.CANCELED
    assert manager.active_path is None


def test_save_to_bound_path(manager, file_access, tmp_path):
    file_access.save_answer = tmp_path / "quiz.json"
    manager.handle_command(FileCommand.SAVE_AS)
    file_access.save_answer = None

    manager.update_settings(AppSettings(auto_save=False))
    manager.update_details(title="Second draft")
    result = manager.handle_command(FileCommand.SAVE)
    assert result.ok
    assert json.loads((tmp_path / "quiz.json").read_text(encoding="utf-8"))["title"] == "Second draft"


def test_open_command(manager, file_access, questionnaire, tmp_path):
    source = tmp_path / "capitals.json"
    source.write_text(serialize_questionnaire(questionnaire), encoding="utf-8")
    file_access.open_answer = source

    result = manager.handle_command(FileCommand.OPEN)
    assert result.ok
    assert result.path == source
    assert manager.questionnaire == questionnaire


def test_failed_open_reports_and_keeps_questionnaire(manager, file_access, tmp_path):
    current = manager.questionnaire
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2, 3]", encoding="utf-8")
    file_access.open_answer = bad

    result = manager.handle_command(FileCommand.OPEN)
    assert result.status is CommandStatus.FAILED
    assert "JSON object" in result.message
    assert manager.questionnaire == current


def test_import_command_with_content(manager, questionnaire):
    result = manager.handle_command(FileCommand.IMPORT, serialize_questionnaire(questionnaire))
    assert result.ok
    assert "3 questions" in result.message
    assert manager.questionnaire.id == questionnaire.id


def test_import_command_rejects_bad_content(manager):
    current = manager.questionnaire
    result = manager.handle_command(FileCommand.IMPORT, "{}")
    assert result.status is CommandStatus.FAILED
    assert manager.questionnaire == current


def test_import_is_kept_when_bound_file_cannot_be_written(cache, manager, file_access, questionnaire, tmp_path):
    bound = tmp_path / "bound.json"
    file_access.save_answer = bound
    manager.handle_command(FileCommand.SAVE_AS)
    bound.unlink()
    bound.mkdir()

    result = manager.handle_command(FileCommand.IMPORT, serialize_questionnaire(questionnaire))
    assert result.status is CommandStatus.FAILED
    assert manager.questionnaire.title == "Capitals"
    assert parse_questionnaire(cache.get(CACHE_KEY_QUESTIONNAIRE)).title == "Capitals"
    assert manager.active_path == bound


def test_import_command_reads_picked_file(manager, file_access, questionnaire, tmp_path):
    source = tmp_path / "capitals.json"
    source.write_text(serialize_questionnaire(questionnaire), encoding="utf-8")
    file_access.open_answer = source

    result = manager.handle_command(FileCommand.IMPORT)
    assert result.ok
    assert manager.questionnaire.id == questionnaire.id
    assert manager.active_path is None


def test_import_command_without_content_asks_for_file(manager):
    assert manager.handle_command(FileCommand.IMPORT).status is CommandStatus.CANCELED


def test_export_command(manager, file_access, tmp_path):
    target = tmp_path / "copy.json"
    file_access.save_answer = target

    result = manager.handle_command(FileCommand.EXPORT)
    assert result.ok
    assert target.exists()
    assert manager.active_path is None


def test_begin_presenting_requires_questions(manager):
    with pytest.raises(DocumentValidationError):
        manager.begin_presenting()


def test_begin_presenting_validates(manager):
    question = manager.add_question()
    manager.update_question(question.id, answers=["only"])
    with pytest.raises(DocumentValidationError):
        manager.begin_presenting()


def test_presenting_and_history(cache, file_access, questionnaire, countdown):
    cache.set(CACHE_KEY_QUESTIONNAIRE, serialize_questionnaire(questionnaire))
    manager = QuizManager(cache, file_access)
    manager.restore_last_questionnaire()

    session = manager.begin_presenting(countdown)
    assert session.state is PresenterState.IDLE
    session.start_question(0)
    session.mark_correct()
    session.reset_session()

    history = manager.list_history()
    assert len(history) == 1
    assert history[0].correct_count == 1


class BrokenCache(MemoryCache):
    def set(self, key, value):
        raise WriteFailedError(f"disk full while writing {key}")


def test_cache_failures_reach_the_callback(file_access):
    manager = QuizManager(BrokenCache(), file_access)
    failures = []
    manager.on_write_failed = failures.append

    manager.restore_last_questionnaire()
    manager.update_settings(AppSettings(ui_font_size=12))

    assert manager.settings.ui_font_size == 12
    assert len(failures) == 1
