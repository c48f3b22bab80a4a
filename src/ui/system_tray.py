"""
System tray functionality for the application.

This module provides the system tray icon and its context menu. The menu has
a fixed header (status, active group, connection details) followed by a
section of actions that the tray controller adds and removes as the
connection state changes.
"""

import logging
from typing import Callable, Optional
from PySide6.QtWidgets import QSystemTrayIcon, QMenu
from PySide6.QtGui import QIcon, QPixmap, QAction, QColor
from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

CONNECTED_ICON_NAME = "network-vpn"
DISCONNECTED_ICON_NAME = "network-vpn-disconnected"


def menu_text(text: str) -> str:
    """Escape text so QMenu shows it as is.

    & marks a mnemonic and a tab starts the shortcut column in menu entries.
    """
    return text.replace("&", "&&").replace("\t", "    ")


class TrayAction:
    """Handle for an action inserted into the tray menu"""

    def __init__(self, menu: Optional[QMenu], action: QAction):
        self.menu = menu
        self.action: Optional[QAction] = action

    def remove(self) -> None:
        if self.action is not None:
            if self.menu is not None:
                self.menu.removeAction(self.action)
            self.action.deleteLater()
            self.action = None


class SystemTrayManager(QObject):
    """
    Manager for system tray icon and related functionality.

    Implements the TrayHost capabilities used by the tray controller.
    """

    quit_requested = Signal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.tray_icon: Optional[QSystemTrayIcon] = None
        self.tray_menu: Optional[QMenu] = None
        self.title_action: QAction
        self.group_action: QAction
        self.details_action: QAction
        self.actions_end: QAction
        self.is_connected = False
        self.title = "NordVPN"

        # Load icons
        self.load_icons()
        self.setup_tray_icon()

    def load_icons(self) -> None:
        """Load the indicator icons from the desktop icon theme"""
        self.connected_icon = QIcon.fromTheme(CONNECTED_ICON_NAME)
        if self.connected_icon.isNull():
            # Fallback to a simple pixmap
            pixmap = QPixmap(32, 32)
            pixmap.fill(QColor("#4687ff"))
            self.connected_icon = QIcon(pixmap)
            logger.warning(f"Icon not found in theme: {CONNECTED_ICON_NAME}")

        self.disconnected_icon = QIcon.fromTheme(DISCONNECTED_ICON_NAME)
        if self.disconnected_icon.isNull():
            pixmap = QPixmap(32, 32)
            pixmap.fill(QColor("#808080"))
            self.disconnected_icon = QIcon(pixmap)
            logger.warning(f"Icon not found in theme: {DISCONNECTED_ICON_NAME}")

    def setup_tray_icon(self) -> None:
        """Setup system tray icon and context menu"""
        if not QSystemTrayIcon.isSystemTrayAvailable():
            logger.warning("System tray is not available")
            return

        # Create tray icon with the disconnected icon
        self.tray_icon = QSystemTrayIcon(self.disconnected_icon, self.parent())

        tray_menu = self.build_menu()
        self.tray_icon.setContextMenu(tray_menu)
        self.tray_icon.setToolTip(self.title)

        # Show the tray icon
        self.tray_icon.show()
        logger.debug("System tray icon created and shown")

    def build_menu(self) -> QMenu:
        """Create the context menu with its fixed entries"""
        tray_menu = QMenu()

        # Header entries are informational only
        self.title_action = tray_menu.addAction(self.title)
        self.title_action.setIcon(self.connected_icon)
        self.title_action.setEnabled(False)

        tray_menu.addSeparator()
        self.group_action = tray_menu.addAction("")
        self.group_action.setEnabled(False)

        tray_menu.addSeparator()
        self.details_action = tray_menu.addAction("")
        self.details_action.setEnabled(False)

        tray_menu.addSeparator()
        # Controller actions are inserted before this separator
        self.actions_end = tray_menu.addSeparator()

        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.quit_requested.emit)
        tray_menu.addAction(quit_action)

        self.tray_menu = tray_menu
        return tray_menu

    def set_indicator_visible(self, visible: bool) -> None:
        """Swap between the connected and disconnected icon.

        The tray icon itself stays visible, otherwise the menu could not be reached.
        """
        if visible != self.is_connected:
            logger.debug(f"System tray indicator {'shown' if visible else 'hidden'}")
        self.is_connected = visible
        if self.tray_icon:
            self.tray_icon.setIcon(self.connected_icon if visible else self.disconnected_icon)

    def set_title(self, text: str) -> None:
        self.title = text
        if self.tray_menu is not None:
            self.title_action.setText(menu_text(text))
        if self.tray_icon:
            self.tray_icon.setToolTip(text)

    def set_group_text(self, text: str) -> None:
        if self.tray_menu is not None:
            self.group_action.setText(menu_text(text))

    def set_details_text(self, text: str) -> None:
        if self.tray_menu is not None:
            self.details_action.setText(menu_text(text))

    def add_action(self, label: str, callback: Callable[[], None]) -> TrayAction:
        """Insert an action at the end of the actions section"""
        action = QAction(label, self)
        action.triggered.connect(lambda checked=False: callback())
        if self.tray_menu is not None:
            self.tray_menu.insertAction(self.actions_end, action)
            return TrayAction(self.tray_menu, action)
        return TrayAction(None, action)

    def teardown(self) -> None:
        """Cleanup system tray resources"""
        if self.tray_icon:
            self.tray_icon.hide()
            self.tray_icon = None
        if self.tray_menu is not None:
            self.tray_menu.deleteLater()
            self.tray_menu = None
        logger.debug("System tray cleaned up")
