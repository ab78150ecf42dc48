"""Exception types raised by the HQuiz core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HQuizError(Exception):
    """Base class for recoverable HQuiz failures."""


class DocumentValidationError(HQuizError):
    """Raised when a questionnaire document is malformed or fails validation."""


class DocumentReadError(HQuizError):
    """Raised when a questionnaire file cannot be read."""


class WriteFailedError(HQuizError):
    """Raised when a file or cache write did not complete."""


class ViolationReason(Enum):
    INVALID_INDEX = "invalid_index"
    ALREADY_ANSWERED = "already_answered"
    NOT_IDLE = "not_idle"
    NOT_RUNNING = "not_running"
    NOT_ACTIVE = "not_active"
    INVALID_OPTION = "invalid_option"
    MANUAL_JUDGMENT_REQUIRED = "manual_judgment_required"


@dataclass(frozen=True, slots=True)
class StateViolation:
    """Rejected presenter action. Reported, never raised."""

    reason: ViolationReason
    detail: str

    def __str__(self) -> str:
        return f"{self.reason.value}: {self.detail}"
