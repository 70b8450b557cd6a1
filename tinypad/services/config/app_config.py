from __future__ import annotations

import codecs
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from tinypad.domain.interfaces import IAppConfig
from tinypad.services.config.ini_config_service import IniConfigService
from tinypad.services.edit_history import DEFAULT_UNDO_LIMIT
from tinypad.services.file_service import DEFAULT_ENCODING

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_LOGGER = logging.getLogger(__name__)


def _project_root_fallback() -> Path:
    """Bundle root under PyInstaller, otherwise the repository root."""
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    # tinypad/services/config/app_config.py -> parents[3] is the repo root
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Typed settings over IniConfigService.

    [editor] encoding   text encoding for load/save (default utf-8)
    [editor] undo_limit maximum number of undoable edits (default 100)
    [logging] level     root log level (default WARNING)
    """

    ini: IniConfigService
    project_root: Path

    def encoding(self) -> str:
        name = (self.ini.get("editor", "encoding", DEFAULT_ENCODING) or "").strip()
        try:
            codecs.lookup(name)
        except LookupError:
            _LOGGER.warning("Unknown encoding %r in config; using %s", name, DEFAULT_ENCODING)
            return DEFAULT_ENCODING
        return name

    def undo_limit(self) -> int:
        n = self.ini.get_int("editor", "undo_limit", DEFAULT_UNDO_LIMIT)
        if n is None or n < 1:
            return DEFAULT_UNDO_LIMIT
        return n

    def log_level(self) -> str:
        level = (self.ini.get("logging", "level", "WARNING") or "").strip().upper()
        return level if level in _LEVELS else "WARNING"

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
