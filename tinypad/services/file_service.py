from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from tinypad.domain.errors import ReadError, WriteError
from tinypad.domain.interfaces import IFileService

_LOGGER = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class FileService(IFileService):
    """
    Line-normalizing reads and atomic, verbatim writes for plain text files.

    On read, ``\\r\\n`` and ``\\r`` become ``\\n`` and every line (the last one too)
    ends with a single ``\\n``. On write the buffer goes out untouched.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def read_text(self, path: Path) -> str:
        try:
            # universal newlines: \r\n and \r arrive as \n
            with path.open("r", encoding=self.encoding, newline=None) as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            _LOGGER.warning("Read failed for %s: %s", path, e)
            raise ReadError(path, str(e)) from e
        if text and not text.endswith("\n"):
            text += "\n"
        return text

    def write_text_atomic(self, path: Path, text: str) -> None:
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise WriteError(path, str(e)) from e

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            _LOGGER.warning("Cannot open %s for write", path)
            raise WriteError(path, "cannot open for write")
        if sf.write(data) != len(data):
            sf.cancelWriting()
            _LOGGER.warning("Short write to %s", path)
            raise WriteError(path, "short write")
        if not sf.commit():
            _LOGGER.warning("Commit failed for %s", path)
            raise WriteError(path, "commit failed")
