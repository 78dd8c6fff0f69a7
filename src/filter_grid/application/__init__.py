"""Application layer."""

from filter_grid.application.scheduling import ScheduledTask, Scheduler
from filter_grid.application.filter_controller import FilterController
from filter_grid.application.facade import FilterGridFacade

__all__ = [
    "ScheduledTask",
    "Scheduler",
    "FilterController",
    "FilterGridFacade",
]
