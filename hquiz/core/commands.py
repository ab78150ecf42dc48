"""Command messages produced by the menu and consumed by :class:`QuizManager`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class FileCommand(Enum):
    NEW = auto()
    OPEN = auto()
    SAVE = auto()
    SAVE_AS = auto()
    IMPORT = auto()
    EXPORT = auto()


class CommandStatus(Enum):
    OK = auto()
    CANCELED = auto()
    FAILED = auto()


@dataclass(slots=True)
class CommandResult:
    """Outcome of a file command, ready to be shown to the user."""

    command: FileCommand
    status: CommandStatus
    message: str = ""
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.OK
