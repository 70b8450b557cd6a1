from __future__ import annotations

import logging
from typing import Callable

from tinypad.domain.errors import NothingToRedo, NothingToUndo
from tinypad.domain.models import DocumentState, EditRecord

_LOGGER = logging.getLogger(__name__)

DEFAULT_UNDO_LIMIT = 100


class EditHistory:
    """
    Linear undo/redo over a DocumentState's text.

    Records before ``cursor`` are undoable, records from ``cursor`` on are
    redoable. Recording a new edit drops the redoable ones.
    """

    def __init__(
        self,
        state: DocumentState,
        *,
        limit: int = DEFAULT_UNDO_LIMIT,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self._state = state
        self._limit = limit
        self._on_change = on_change
        self._records: list[EditRecord] = []
        self._cursor = 0
        # cursor value matching the last saved/loaded content; None once unreachable
        self._save_point: int | None = 0

    def __len__(self) -> int:
        return len(self._records)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def limit(self) -> int:
        return self._limit

    # ---------- Recording ----------
    def record(self, edit: EditRecord) -> None:
        if self._cursor < len(self._records):
            del self._records[self._cursor :]
            if self._save_point is not None and self._save_point > self._cursor:
                self._save_point = None
        self._records.append(edit)
        self._cursor += 1

        if len(self._records) > self._limit:
            del self._records[0]
            self._cursor -= 1
            if self._save_point is not None:
                self._save_point -= 1
                if self._save_point < 0:
                    self._save_point = None

    def clear(self) -> None:
        self._records.clear()
        self._cursor = 0
        self._save_point = 0

    # ---------- Save point ----------
    def mark_save_point(self) -> None:
        self._save_point = self._cursor

    def at_save_point(self) -> bool:
        return self._save_point == self._cursor

    # ---------- Undo / Redo ----------
    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._records)

    def undo(self) -> EditRecord:
        if not self.can_undo():
            raise NothingToUndo()
        edit = self._records[self._cursor - 1]
        self._state.text = edit.inverted().apply(self._state.text)
        self._cursor -= 1
        _LOGGER.debug("Undo %s at %d (cursor=%d)", edit.label, edit.position, self._cursor)
        self._notify()
        return edit

    def redo(self) -> EditRecord:
        if not self.can_redo():
            raise NothingToRedo()
        edit = self._records[self._cursor]
        self._state.text = edit.apply(self._state.text)
        self._cursor += 1
        _LOGGER.debug("Redo %s at %d (cursor=%d)", edit.label, edit.position, self._cursor)
        self._notify()
        return edit

    # ---------- Presentation ----------
    def undo_label(self) -> str:
        if not self.can_undo():
            return "Undo"
        return f"Undo {self._records[self._cursor - 1].label}"

    def redo_label(self) -> str:
        if not self.can_redo():
            return "Redo"
        return f"Redo {self._records[self._cursor].label}"

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
