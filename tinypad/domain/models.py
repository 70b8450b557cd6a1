from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tinypad.domain.errors import EditConflictError


@dataclass
class DocumentState:
    bound_path: Path | None = None
    dirty: bool = False
    text: str = ""


@dataclass(frozen=True)
class EditRecord:
    """
    A reversible splice over the buffer: at ``position``, ``removed`` is replaced
    by ``inserted``. Pure insertions have an empty ``removed``, pure deletions an
    empty ``inserted``.
    """

    position: int
    removed: str = ""
    inserted: str = ""

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")
        if not self.removed and not self.inserted:
            raise ValueError("an edit must remove or insert something")

    @classmethod
    def insertion(cls, position: int, text: str) -> EditRecord:
        return cls(position=position, inserted=text)

    @classmethod
    def deletion(cls, position: int, text: str) -> EditRecord:
        return cls(position=position, removed=text)

    @classmethod
    def between(cls, old: str, new: str) -> EditRecord | None:
        """Smallest single splice turning ``old`` into ``new`` (None if equal)."""
        if old == new:
            return None
        limit = min(len(old), len(new))
        start = 0
        while start < limit and old[start] == new[start]:
            start += 1
        # suffix may not overlap the common prefix
        end_old, end_new = len(old), len(new)
        while end_old > start and end_new > start and old[end_old - 1] == new[end_new - 1]:
            end_old -= 1
            end_new -= 1
        return cls(position=start, removed=old[start:end_old], inserted=new[start:end_new])

    @classmethod
    def from_change(
        cls, old: str, new: str, position: int, removed: int, added: int
    ) -> EditRecord | None:
        """
        Splice reported by the widget as ``(position, removed, added)`` character
        counts. The range may be wider than the real change; it is narrowed to
        the differing part. Falls back to ``between`` when the range does not
        describe ``old`` -> ``new``.
        """
        end_old = position + removed
        end_new = position + added
        if (
            position < 0
            or end_old > len(old)
            or end_new > len(new)
            or len(old) - removed != len(new) - added
            or old[:position] != new[:position]
            or old[end_old:] != new[end_new:]
        ):
            return cls.between(old, new)
        inner = cls.between(old[position:end_old], new[position:end_new])
        if inner is None:
            return None
        return cls(position=position + inner.position, removed=inner.removed, inserted=inner.inserted)

    @property
    def is_insertion(self) -> bool:
        return not self.removed

    @property
    def is_deletion(self) -> bool:
        return not self.inserted

    @property
    def label(self) -> str:
        if self.is_insertion:
            return "Typing"
        if self.is_deletion:
            return "Deletion"
        return "Replace"

    def apply(self, text: str) -> str:
        end = self.position + len(self.removed)
        if self.position > len(text) or text[self.position:end] != self.removed:
            raise EditConflictError(
                f"{self.label} at {self.position} does not match the buffer"
            )
        return text[: self.position] + self.inserted + text[end:]

    def inverted(self) -> EditRecord:
        return EditRecord(position=self.position, removed=self.inserted, inserted=self.removed)
