from pathlib import Path

import pytest

from hquiz.core.countdown import Countdown
from hquiz.core.models import Question, QuestionKind, Questionnaire
from hquiz.core.services.file_access import FileAccess
from hquiz.core.services.local_cache import MemoryCache
from hquiz.core.services.progress_store import ProgressStore


class ScriptedFileAccess(FileAccess):
    """File access whose dialogs return pre-set answers instead of asking."""

    def __init__(self) -> None:
        self.open_answer: Path | None = None
        self.save_answer: Path | None = None
        self.offered_names: list[str] = []

    def open_file(self, file_filter):
        return self.open_answer

    def save_file_as(self, default_name, file_filter):
        self.offered_names.append(default_name)
        return self.save_answer


@pytest.fixture
def cache():
    return MemoryCache()


@pytest.fixture
def file_access():
    return ScriptedFileAccess()


@pytest.fixture
def store(cache):
    return ProgressStore(cache)


@pytest.fixture
def countdown():
    """Countdown without a clock; tests call tick() themselves."""
    return Countdown()


@pytest.fixture
def questionnaire():
    """Three multiple-choice questions with 60, 30 and 45 second limits."""
    return Questionnaire(
        id="quiz-1",
        title="Capitals",
        description="Warm-up round",
        questions=[
            Question(
                id="q1",
                kind=QuestionKind.MULTIPLE_CHOICE,
                prompt="Capital of Norway?",
                answers=["Bergen", "Oslo", "Trondheim", "Tromsø"],
                correct_answer=1,
                time_limit=60,
            ),
            Question(
                id="q2",
                kind=QuestionKind.MULTIPLE_CHOICE,
                prompt="Capital of Sweden?",
                answers=["Stockholm", "Gothenburg"],
                correct_answer=0,
                time_limit=30,
            ),
            Question(
                id="q3",
                kind=QuestionKind.MULTIPLE_CHOICE,
                prompt="Capital of Denmark?",
                answers=["Aarhus", "Odense", "Copenhagen"],
                correct_answer=2,
                time_limit=45,
            ),
        ],
    )


@pytest.fixture
def mixed_questionnaire():
    """One question of every kind, each with a 20 second limit."""
    return Questionnaire(
        id="quiz-2",
        title="Mixed",
        questions=[
            Question(id="mc", kind=QuestionKind.MULTIPLE_CHOICE, prompt="2 + 2?", answers=["3", "4"], correct_answer=1, time_limit=20),
            Question(id="img", kind=QuestionKind.IMAGE_CHOICE, prompt="Pick the cat", answers=["cat.png", "dog.png"], correct_answer=0, time_limit=20),
            Question(id="tf", kind=QuestionKind.TRUE_FALSE, prompt="The sky is green.", correct_answer=1, time_limit=20),
            Question(id="text", kind=QuestionKind.FREE_TEXT, prompt="Name a prime number.", time_limit=20),
        ],
    )


@pytest.fixture
def advance(countdown):
    """Tick the shared countdown a number of times."""
    def _advance(times):
        for _ in range(times):
            countdown.tick()
    return _advance
