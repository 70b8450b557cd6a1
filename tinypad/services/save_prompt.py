from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable

from tinypad.domain.errors import UnexpectedChoiceError
from tinypad.services.document_tracker import DocumentTracker

_LOGGER = logging.getLogger(__name__)


class PromptState(Enum):
    IDLE = auto()
    PROMPTING_UNSAVED_CHANGES = auto()
    SAVING = auto()
    CANCELLED = auto()


class UnsavedChoice(Enum):
    """The three answers offered when unsaved changes would be discarded."""

    SAVE = auto()
    DISCARD = auto()
    CANCEL = auto()


class PromptOutcome(Enum):
    PROCEEDED = auto()
    CANCELLED = auto()
    SAVE_FAILED = auto()


class SavePromptWorkflow:
    """
    Guards operations that would throw the buffer away (new/open/close/exit).

    ``ask`` returns an UnsavedChoice, or None when the prompt was dismissed.
    ``save`` performs a save (possibly asking for a path); success is judged by
    the tracker's dirty flag afterwards, not by its return value.
    """

    def __init__(
        self,
        tracker: DocumentTracker,
        *,
        ask: Callable[[], UnsavedChoice | None],
        save: Callable[[], object],
    ) -> None:
        self._tracker = tracker
        self._ask = ask
        self._save = save
        self._state = PromptState.IDLE

    @property
    def state(self) -> PromptState:
        return self._state

    def _enter(self, state: PromptState) -> None:
        _LOGGER.debug("Save prompt: %s -> %s", self._state.name, state.name)
        self._state = state

    def run(self, operation: Callable[[], object]) -> PromptOutcome:
        try:
            outcome = self._decide()
        finally:
            self._enter(PromptState.IDLE)
        if outcome is PromptOutcome.PROCEEDED:
            operation()
        return outcome

    def _decide(self) -> PromptOutcome:
        if not self._tracker.dirty:
            return PromptOutcome.PROCEEDED

        self._enter(PromptState.PROMPTING_UNSAVED_CHANGES)
        choice = self._ask()

        if choice is UnsavedChoice.SAVE:
            self._enter(PromptState.SAVING)
            self._save()
            if self._tracker.dirty:
                _LOGGER.info("Save did not complete; pending operation aborted")
                return PromptOutcome.SAVE_FAILED
            return PromptOutcome.PROCEEDED
        if choice is UnsavedChoice.DISCARD:
            return PromptOutcome.PROCEEDED
        if choice is UnsavedChoice.CANCEL or choice is None:
            self._enter(PromptState.CANCELLED)
            return PromptOutcome.CANCELLED

        raise UnexpectedChoiceError(choice)
