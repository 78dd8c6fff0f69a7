"""Scheduling abstraction for debounced work.

The controller never talks to a timer API directly; the GUI supplies a
``Scheduler`` that runs callbacks on its own event loop.
"""

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    """Handle to a callback scheduled for later."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. No-op if already run."""
        pass

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the callback is still waiting to run."""
        pass


class Scheduler(ABC):
    """Runs callbacks after a delay on the owner's event loop."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule a callback.

        Args:
            delay_ms: Delay in milliseconds
            callback: Function to call

        Returns:
            Cancellable task handle
        """
        pass
