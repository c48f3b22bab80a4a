"""
Capabilities the tray controller needs from the UI toolkit.

The controller only talks to these protocols, so it can be driven by the Qt
implementation in ui.system_tray / ui.qt_scheduler or by test doubles.
"""

from typing import Protocol, Callable, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """A pending one-shot callback"""

    def cancel(self) -> None:
        """Prevent the callback from firing. Safe to call after it fired."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    def schedule_once(self, delay_seconds: int, callback: Callable[[], None]) -> TimerHandle:
        """Call callback once after delay_seconds on the UI thread"""
        ...


@runtime_checkable
class ActionHandle(Protocol):
    """A clickable menu entry owned by whoever added it"""

    def remove(self) -> None:
        """Remove the entry from the menu"""
        ...


@runtime_checkable
class TrayHost(Protocol):
    """Tray indicator and menu"""

    def set_indicator_visible(self, visible: bool) -> None:
        """Show or hide the connected indicator"""
        ...

    def set_title(self, text: str) -> None:
        """Set the header line of the menu"""
        ...

    def set_group_text(self, text: str) -> None:
        """Set the line showing the active server group"""
        ...

    def set_details_text(self, text: str) -> None:
        """Set the multi-line connection details block"""
        ...

    def add_action(self, label: str, callback: Callable[[], None]) -> ActionHandle:
        """Append a clickable entry to the actions section of the menu"""
        ...

    def teardown(self) -> None:
        """Release the tray icon and menu"""
        ...
