from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from tinypad.domain.errors import HistoryError, ReadError, WriteError
from tinypad.domain.interfaces import ISettingsService
from tinypad.domain.models import EditRecord
from tinypad.services.document_tracker import DocumentTracker
from tinypad.services.save_prompt import (
    PromptOutcome,
    SavePromptWorkflow,
    UnsavedChoice,
)
from tinypad.services.ui.ports.dialogs import IFileDialogService
from tinypad.services.ui.ports.messages import IMessageService
from tinypad.utils.constants import APP_NAME, STATUS_MSEC, TEXT_FILTER

_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor
    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str, cursor_pos: int | None = None) -> None: ...

    # window chrome
    def set_title(self, title: str) -> None: ...
    def set_modified(self, modified: bool) -> None: ...
    def set_undo_state(
        self, can_undo: bool, undo_label: str, can_redo: bool, redo_label: str
    ) -> None: ...

    # status
    def show_status(self, text: str, msec: int = STATUS_MSEC) -> None: ...

    # lifecycle
    def close_window(self) -> None: ...
    def quit_app(self) -> None: ...


class MainPresenter:
    """
    Coordinates the passive view with the DocumentTracker.

    Commands that would discard the buffer (new/open/close/exit) run through
    the SavePromptWorkflow first.
    """

    def __init__(
        self,
        view: IMainView,
        tracker: DocumentTracker,
        messages: IMessageService,
        dialogs: IFileDialogService,
        settings: ISettingsService | None = None,
        *,
        app_name: str = APP_NAME,
    ) -> None:
        self.view = view
        self.tracker = tracker
        self.messages = messages
        self.dialogs = dialogs
        self.settings = settings
        self.app_name = app_name

        self.workflow = SavePromptWorkflow(
            tracker, ask=self._ask_unsaved, save=self.save
        )
        # True while the presenter itself pushes text into the view
        self._syncing = False

        self.tracker.subscribe(self.refresh)
        self.refresh()

    # ---------- View sync ----------
    def refresh(self) -> None:
        h = self.tracker.history
        self.view.set_title(self.tracker.title_for(self.app_name))
        self.view.set_modified(self.tracker.dirty)
        self.view.set_undo_state(h.can_undo(), h.undo_label(), h.can_redo(), h.redo_label())

    def _push_text(self, cursor_pos: int | None = None) -> None:
        self._syncing = True
        try:
            self.view.set_editor_text(self.tracker.text, cursor_pos)
        finally:
            self._syncing = False

    def on_text_edited(
        self, text: str, change: tuple[int, int, int] | None = None
    ) -> None:
        """
        Called by the view whenever the editor content changes. ``change`` is the
        widget's ``(position, removed, added)`` report, when it has one.
        """
        if self._syncing:
            return
        if change is None:
            edit = EditRecord.between(self.tracker.text, text)
        else:
            edit = EditRecord.from_change(self.tracker.text, text, *change)
        if edit is None:
            return
        self.tracker.apply_edit(edit)

    # ---------- Save prompt ----------
    def _ask_unsaved(self) -> UnsavedChoice | None:
        return self.messages.ask_unsaved_changes(
            self.view, "Warning", "You have unsaved changes!"
        )

    def _start_dir(self) -> str | None:
        if self.tracker.bound_path is not None:
            return str(self.tracker.bound_path.parent)
        return self.settings.get_last_dir() if self.settings else None

    def _remember_dir(self, path: Path) -> None:
        if self.settings is not None:
            self.settings.set_last_dir(str(path.parent))

    # ---------- File commands ----------
    def new_file(self) -> PromptOutcome:
        def _new() -> None:
            self.tracker.new()
            self._push_text(0)

        return self.workflow.run(_new)

    def open_dialog(self) -> PromptOutcome:
        def _choose_and_open() -> None:
            path = self.dialogs.get_open_file(self.view, "Open", self._start_dir(), TEXT_FILTER)
            if path is None:
                return
            self._load(path)

        return self.workflow.run(_choose_and_open)

    def open_path(self, path: Path) -> PromptOutcome:
        return self.workflow.run(lambda: self._load(path))

    def _load(self, path: Path) -> bool:
        try:
            self.tracker.load(path)
        except ReadError as e:
            self.messages.error(self.view, "Error", f"Read error: {e.reason}\n{path}")
            return False
        self._push_text(0)
        self._remember_dir(path)
        self.view.show_status(f"Opened: {path}", STATUS_MSEC)
        return True

    def save(self) -> bool:
        if self.tracker.bound_path is None:
            return self.save_as()
        return self._write_to(self.tracker.bound_path)

    def save_as(self) -> bool:
        start = str(self.tracker.bound_path) if self.tracker.bound_path else self._start_dir()
        path = self.dialogs.get_save_file(self.view, "Save As", start, TEXT_FILTER)
        if path is None:
            return False
        return self._write_to(path)

    def _write_to(self, path: Path) -> bool:
        try:
            self.tracker.save(path)
        except WriteError as e:
            self.messages.error(self.view, "Error", f"Write failure: {e.reason}\n{path}")
            return False
        self._remember_dir(path)
        self.view.show_status(f"Saved: {path}", STATUS_MSEC)
        return True

    # ---------- Close / exit ----------
    def request_close(self) -> bool:
        """Asked by the window's close event; True means the window may close."""
        return self.workflow.run(lambda: None) is PromptOutcome.PROCEEDED

    def close_document(self) -> PromptOutcome:
        return self.workflow.run(self.view.close_window)

    def exit_app(self) -> PromptOutcome:
        return self.workflow.run(self.view.quit_app)

    # ---------- History ----------
    def undo(self) -> bool:
        try:
            edit = self.tracker.undo()
        except HistoryError as e:
            self.view.show_status(str(e), STATUS_MSEC)
            return False
        self._push_text(edit.position + len(edit.removed))
        return True

    def redo(self) -> bool:
        try:
            edit = self.tracker.redo()
        except HistoryError as e:
            self.view.show_status(str(e), STATUS_MSEC)
            return False
        self._push_text(edit.position + len(edit.inserted))
        return True
