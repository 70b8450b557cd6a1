from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from tinypad.domain.interfaces import IFileService
from tinypad.domain.models import DocumentState, EditRecord
from tinypad.services.edit_history import DEFAULT_UNDO_LIMIT, EditHistory

_LOGGER = logging.getLogger(__name__)

UNTITLED = "Untitled"
DIRTY_MARKER = "* "


class DocumentTracker:
    """
    Owns the DocumentState (buffer, bound path, dirty flag) and its EditHistory.

    Listeners registered with ``subscribe`` are called once after each actual
    state change, so views can re-render title and affordances.
    """

    def __init__(
        self,
        files: IFileService,
        *,
        state: DocumentState | None = None,
        undo_limit: int = DEFAULT_UNDO_LIMIT,
    ) -> None:
        self.files = files
        self.state = state or DocumentState()
        self.history = EditHistory(
            self.state, limit=undo_limit, on_change=self._on_history_change
        )
        self._listeners: list[Callable[[], None]] = []

    # ---------- Observers ----------
    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ---------- Queries ----------
    @property
    def dirty(self) -> bool:
        return self.state.dirty

    @property
    def bound_path(self) -> Path | None:
        return self.state.bound_path

    @property
    def text(self) -> str:
        return self.state.text

    def title_for(self, app_name: str) -> str:
        where = str(self.state.bound_path) if self.state.bound_path else UNTITLED
        prefix = DIRTY_MARKER if self.state.dirty else ""
        return f"{prefix}{app_name} - {where}"

    # ---------- File lifecycle ----------
    def new(self) -> None:
        self.state.text = ""
        self.state.bound_path = None
        self.state.dirty = False
        self.history.clear()
        self._notify()

    def load(self, path: Path) -> None:
        """Replace the buffer with ``path``'s content. ReadError leaves everything as is."""
        text = self.files.read_text(path)
        self.state.text = text
        self.state.bound_path = path
        self.state.dirty = False
        self.history.clear()
        _LOGGER.info("Loaded %s (%d chars)", path, len(text))
        self._notify()

    def save(self, path: Path) -> None:
        """Write the buffer to ``path``. On WriteError, dirty and bound path stay as they were."""
        self.files.write_text_atomic(path, self.state.text)
        self.state.bound_path = path
        self.state.dirty = False
        self.history.mark_save_point()
        _LOGGER.info("Saved %s", path)
        self._notify()

    # ---------- Editing ----------
    def mark_dirty(self) -> None:
        if self.state.dirty:
            return
        self.state.dirty = True
        self._notify()

    def apply_edit(self, edit: EditRecord) -> None:
        self.state.text = edit.apply(self.state.text)
        self.history.record(edit)
        if self.state.dirty:
            # text changed, affordances still need a refresh
            self._notify()
        else:
            self.mark_dirty()

    def undo(self) -> EditRecord:
        return self.history.undo()

    def redo(self) -> EditRecord:
        return self.history.redo()

    def _on_history_change(self) -> None:
        if self.history.at_save_point():
            self.state.dirty = False
            self._notify()
        elif self.state.dirty:
            self._notify()
        else:
            self.mark_dirty()
