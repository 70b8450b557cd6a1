from __future__ import annotations

from pathlib import Path


class TinyPadError(Exception):
    """Base class for all editor errors."""


class FileAccessError(TinyPadError):
    """A file could not be read or written. Carries the path and a short reason."""

    verb = "access"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot {self.verb} {path}: {reason}")
        self.path = path
        self.reason = reason


class ReadError(FileAccessError):
    """File missing, unreadable, permission denied or not decodable."""

    verb = "read"


class WriteError(FileAccessError):
    """Disk full, permission denied or invalid path."""

    verb = "write"


class HistoryError(TinyPadError):
    """Undo/redo requested while unavailable."""


class NothingToUndo(HistoryError):
    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class NothingToRedo(HistoryError):
    def __init__(self) -> None:
        super().__init__("Nothing to redo")


class EditConflictError(TinyPadError):
    """An edit record does not match the buffer it is applied to."""


class UnexpectedChoiceError(TinyPadError):
    """The confirmation dialog answered outside Save/Discard/Cancel. Fatal."""

    def __init__(self, choice: object) -> None:
        super().__init__(f"Unexpected unsaved-changes response: {choice!r}")
        self.choice = choice
