from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from tinypad.domain.interfaces import ISettingsService
from tinypad.utils.constants import SETTINGS_GEOMETRY, SETTINGS_LAST_DIR


class SettingsService(ISettingsService):
    """Persist small UI bits: window geometry and the file chooser's last directory."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_last_dir(self) -> str | None:
        v = self._s.value(SETTINGS_LAST_DIR)
        return str(v) if v else None

    def set_last_dir(self, directory: str) -> None:
        self._s.setValue(SETTINGS_LAST_DIR, directory)
