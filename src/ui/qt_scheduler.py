"""
One-shot timers on the Qt event loop.
"""

import logging
from typing import Callable, Optional
from PySide6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class QtTimerHandle:
    """Cancellable handle for a single-shot QTimer"""

    def __init__(self, timer: QTimer):
        self.timer: Optional[QTimer] = timer

    def is_active(self) -> bool:
        return self.timer is not None and self.timer.isActive()

    def cancel(self) -> None:
        if self.timer is not None:
            self.timer.stop()
            self.timer.deleteLater()
            self.timer = None


class QtScheduler:
    """Schedules callbacks on the thread owning the parent object (the UI thread)"""

    def __init__(self, parent: Optional[QObject] = None):
        self.parent = parent

    def schedule_once(self, delay_seconds: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        timer.setInterval(int(delay_seconds * 1000))
        handle = QtTimerHandle(timer)

        def fire() -> None:
            handle.cancel()
            callback()

        timer.timeout.connect(fire)
        timer.start()
        return handle
