from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from tinypad.services.save_prompt import UnsavedChoice


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for showing messages. Decouples business logic from Qt widgets.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...

    def ask_unsaved_changes(
        self, parent: Any | None, title: str, text: str
    ) -> UnsavedChoice | None:
        """
        Offer Save / Discard / Cancel. Returns None when the prompt is
        dismissed without an explicit choice.
        """
        ...
