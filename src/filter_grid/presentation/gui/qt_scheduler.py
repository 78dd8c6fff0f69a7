"""Scheduler backed by single-shot QTimers on the GUI event loop."""

from typing import Callable, Optional

from PyQt5.QtCore import QObject, QTimer

from filter_grid.application.scheduling import ScheduledTask, Scheduler


class QtTimerTask(ScheduledTask):
    """A callback waiting on a single-shot QTimer."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]):
        self._timer = timer
        self._callback = callback
        self._active = True
        timer.timeout.connect(self._fire)

    def _fire(self):
        if not self._active:
            return
        self._active = False
        self._timer.deleteLater()
        self._callback()

    def cancel(self) -> None:
        if self._active:
            self._active = False
            self._timer.stop()
            self._timer.deleteLater()

    @property
    def active(self) -> bool:
        return self._active


class QtScheduler(Scheduler):
    """Schedule callbacks with QTimer."""

    def __init__(self, parent: Optional[QObject] = None):
        """Initialize scheduler.

        Args:
            parent: Owner of the created timers
        """
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        task = QtTimerTask(timer, callback)
        timer.start(delay_ms)
        return task
