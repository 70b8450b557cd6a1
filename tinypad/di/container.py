from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from tinypad.domain.interfaces import IAppConfig, IFileService, ISettingsService
from tinypad.services.config.app_config import build_app_config
from tinypad.services.document_tracker import DocumentTracker
from tinypad.services.file_service import FileService
from tinypad.services.settings_service import SettingsService
from tinypad.services.ui.adapters import QtFileDialogService, QtMessageService
from tinypad.services.ui.main_window import MainWindow
from tinypad.services.ui.ports.dialogs import IFileDialogService
from tinypad.services.ui.ports.messages import IMessageService
from tinypad.services.ui.presenters.main_presenter import MainPresenter
from tinypad.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds one DocumentTracker per window and binds it through a MainPresenter
    """

    def __init__(
        self,
        config: IAppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: IAppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService(
            encoding=self.config.encoding()
        )
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings)

    # ---------- Factories ----------

    def build_tracker(self) -> DocumentTracker:
        return DocumentTracker(self.file_service, undo_limit=self.config.undo_limit())

    def build_main_presenter(self, view, tracker: DocumentTracker | None = None) -> MainPresenter:
        return MainPresenter(
            view=view,
            tracker=tracker or self.build_tracker(),
            messages=self.messages,
            dialogs=self.dialogs,
            settings=self.settings_service,
            app_name=APP_NAME,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow with its presenter attached; open ``start_path`` if given."""
        window = MainWindow(settings=self.settings_service, app_title=app_title)
        presenter = self.build_main_presenter(view=window)
        window.attach_presenter(presenter)
        if start_path is not None:
            presenter.open_path(start_path)
        return window
