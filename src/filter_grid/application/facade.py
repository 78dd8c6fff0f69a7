"""Filter Grid Facade - Application layer interface."""

from pathlib import Path
from typing import List, Optional

from filter_grid.application.filter_controller import FilterController
from filter_grid.application.scheduling import Scheduler
from filter_grid.domain.models import FilterCriteria, Record
from filter_grid.infrastructure.config import AppConfig
from filter_grid.infrastructure.logging import get_logger
from filter_grid.infrastructure.seed import default_records, load_seed_file
from filter_grid.infrastructure.store import RecordStore
from filter_grid.shared.exceptions import FilterGridError
from filter_grid.shared.types import RecordField

logger = get_logger(__name__)


class FilterGridFacade:
    """Wires the store, seed data and controller for the GUI and CLI."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self._store: Optional[RecordStore] = None

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def store(self) -> RecordStore:
        """The open store.

        Raises:
            FilterGridError: If ``open`` has not been called
        """
        if self._store is None:
            raise FilterGridError("Store is not open")
        return self._store

    def open(self, seed_path: Optional[Path] = None) -> RecordStore:
        """Create the in-memory store and seed it.

        Args:
            seed_path: YAML seed file (default: built-in sample records)

        Returns:
            The seeded store
        """
        records = load_seed_file(seed_path) if seed_path else default_records()

        self.close()
        store = RecordStore()
        store.create_table()
        store.insert_many(records)
        self._store = store

        logger.info(f"Store opened with {len(records)} record(s)")
        return store

    def create_controller(self, scheduler: Scheduler) -> FilterController:
        """Create a controller bound to the open store."""
        return FilterController(
            self.store,
            scheduler,
            debounce_ms=self._config.debounce_ms,
            page_size=self._config.page_size
        )

    def search(self, **patterns: str) -> List[Record]:
        """Run one filter query immediately.

        Args:
            **patterns: Substring pattern per field name (``code``, ``description``)

        Returns:
            Matching records

        Raises:
            FilterGridError: If a pattern names an unknown field
        """
        known = {f.value for f in RecordField}
        unknown = set(patterns) - known
        if unknown:
            raise FilterGridError(
                f"Unknown filter field(s): {', '.join(sorted(unknown))}",
                fields=sorted(unknown)
            )

        criteria = FilterCriteria(**{k: v or "" for k, v in patterns.items()})
        return self.store.query(criteria, self._config.page_size)

    def close(self) -> None:
        """Close the store if open."""
        if self._store is not None:
            self._store.close()
            self._store = None
