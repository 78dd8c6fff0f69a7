"""Shared fixtures for Filter Grid tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable, List

import pytest
from loguru import logger

from filter_grid.application.scheduling import ScheduledTask, Scheduler
from filter_grid.application.filter_controller import FilterController
from filter_grid.domain.models import Record
from filter_grid.infrastructure.config import AppConfig
from filter_grid.infrastructure.store import RecordStore


class ManualTask(ScheduledTask):
    """Task that runs when the manual clock passes its due time."""

    def __init__(self, due: int, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self._active = True

    def cancel(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def run(self) -> None:
        self._active = False
        self.callback()


class ManualScheduler(Scheduler):
    """Deterministic scheduler driven by ``advance``."""

    def __init__(self):
        self.now = 0
        self.tasks: List[ManualTask] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ManualTask(self.now + delay_ms, callback)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> List[ManualTask]:
        return [t for t in self.tasks if t.active]

    def advance(self, ms: int) -> None:
        """Move the clock forward, running every task that falls due."""
        self.now += ms
        for task in sorted(self.pending, key=lambda t: t.due):
            if task.active and task.due <= self.now:
                task.run()


SAMPLE_DESCRIPTIONS = [
    "The Quick Brown",
    "Quick Brown Fox",
    "Brown Fox Jumps",
    "Fox Jumps Over",
    "Jumps Over The",
    "Over The Lazy",
    "The Lazy Dog",
]


@pytest.fixture
def sample_records():
    """Sample records with predictable codes."""
    return [
        Record(code=f"REC-{i:04d}", description=text)
        for i, text in enumerate(SAMPLE_DESCRIPTIONS)
    ]


@pytest.fixture
def store(sample_records):
    """In-memory store seeded with the sample records."""
    with RecordStore() as s:
        s.create_table()
        s.insert_many(sample_records)
        yield s


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(store, scheduler):
    """Initialized controller over the sample store."""
    c = FilterController(store, scheduler, debounce_ms=250, page_size=100)
    c.initialize()
    return c


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def log_messages():
    """Capture loguru messages for the duration of a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="TRACE")
    yield messages
    logger.remove(handler_id)
