"""Domain layer: interfaces, errors and simple models (dataclasses)."""

from .errors import (
    EditConflictError,
    HistoryError,
    NothingToRedo,
    NothingToUndo,
    ReadError,
    TinyPadError,
    UnexpectedChoiceError,
    WriteError,
)
from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .models import DocumentState, EditRecord

__all__ = [
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
    "DocumentState",
    "EditRecord",
    "TinyPadError",
    "ReadError",
    "WriteError",
    "HistoryError",
    "NothingToUndo",
    "NothingToRedo",
    "EditConflictError",
    "UnexpectedChoiceError",
]
