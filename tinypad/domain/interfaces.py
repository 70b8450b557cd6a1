from __future__ import annotations

from pathlib import Path
from typing import Protocol


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_last_dir(self) -> str | None: ...
    def set_last_dir(self, directory: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...


class IAppConfig(Protocol):
    """Typed application settings on top of the raw INI."""

    def encoding(self) -> str: ...
    def undo_limit(self) -> int: ...
    def log_level(self) -> str: ...
