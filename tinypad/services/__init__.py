"""Concrete service implementations: files, history, document tracking, prompting."""

from .document_tracker import DocumentTracker
from .edit_history import EditHistory
from .file_service import FileService
from .save_prompt import PromptOutcome, PromptState, SavePromptWorkflow, UnsavedChoice
from .settings_service import SettingsService

__all__ = [
    "DocumentTracker",
    "EditHistory",
    "FileService",
    "SavePromptWorkflow",
    "PromptState",
    "PromptOutcome",
    "UnsavedChoice",
    "SettingsService",
]
