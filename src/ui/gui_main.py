import sys
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication, QSystemTrayIcon
from PySide6.QtCore import QTimer

from config.app_settings import AppSettings
from nordvpn.cli_finder import find_nordvpn
from nordvpn.status_client import StatusClient
from ui.qt_scheduler import QtScheduler
from ui.system_tray import SystemTrayManager
from ui.tray_controller import TrayController, PollBackoff

logger = logging.getLogger(__name__)


class TrayApplication:
    """Owns the tray controller for the lifetime of the application"""

    def __init__(self, app: QApplication, settings: AppSettings,
                 binary: Optional[str] = None, refresh_after_action: Optional[bool] = None):
        self.app = app

        binary = binary or settings.get_nordvpn_binary()
        if find_nordvpn(binary) is None:
            logger.warning(f"NordVPN client not found: {binary}, status will be Unknown")
        if refresh_after_action is None:
            refresh_after_action = settings.get_refresh_after_action()
        minimum, maximum = settings.get_poll_delays()

        self.system_tray = SystemTrayManager()
        self.system_tray.quit_requested.connect(self.quit_application)
        self.controller: Optional[TrayController] = TrayController(
            StatusClient(binary),
            self.system_tray,
            QtScheduler(self.system_tray),
            PollBackoff(minimum, maximum),
            refresh_after_action=refresh_after_action,
        )

        logger.debug("TrayApplication initialized successfully")

    def enable(self) -> None:
        if self.controller is not None:
            self.controller.enable()

    def disable(self) -> None:
        if self.controller is not None:
            self.controller.disable()
            self.controller = None

    def quit_application(self) -> None:
        """Quit the application"""
        logger.info("Quitting application")
        self.disable()
        logger.info("Exiting application")
        QApplication.quit()


def init_gui(config_dir: Path, binary: Optional[str] = None,
             refresh_after_action: Optional[bool] = None) -> tuple[TrayApplication, QApplication] | None:
    """Initialize the GUI. Returns None when there is no system tray to live in."""
    app = QApplication()
    app.setQuitOnLastWindowClosed(False)
    app.setApplicationName("NordVPN Tray")

    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.error("System tray is not available")
        return None

    settings = AppSettings(config_dir)
    tray_app = TrayApplication(app, settings, binary, refresh_after_action)
    app.aboutToQuit.connect(tray_app.disable)
    return tray_app, app


def start_gui(tray_app: TrayApplication, app: QApplication) -> None:
    """Start the GUI application"""
    # This is needed because Qt's event loop can block signal processing
    timer = QTimer()
    timer.timeout.connect(lambda: None)  # Do nothing, just allow signals to be processed
    timer.start(100)  # Check every 100ms

    tray_app.enable()

    sys.exit(app.exec())
