"""Debounced filter-to-query controller.

Keystrokes in the filter row are not applied right away. Each edit bumps a
monotonically increasing edit counter and (re)schedules an idle task that
remembers the counter value it was created with. When the task fires it only
does something if no newer edit arrived and no explicit commit (Enter or a
clear action) already ran the query in the meantime.
"""

from typing import Callable, Dict, List, Optional, Union

from filter_grid.application.scheduling import ScheduledTask, Scheduler
from filter_grid.domain.models import FilterRow, Record
from filter_grid.infrastructure.logging import get_logger
from filter_grid.infrastructure.store import RecordStore
from filter_grid.shared.exceptions import StoreError
from filter_grid.shared.types import (
    DEFAULT_DEBOUNCE_MS, DEFAULT_PAGE_SIZE, EditToken, RecordField, RowsListener
)

logger = get_logger(__name__)

Row = Union[FilterRow, Record]


class FilterController:
    """Owns the filter row and the displayed rows of one grid."""

    def __init__(
        self,
        store: RecordStore,
        scheduler: Scheduler,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        page_size: int = DEFAULT_PAGE_SIZE
    ):
        """Initialize controller.

        Args:
            store: Record store to query
            scheduler: Event-loop scheduler for the idle timer
            debounce_ms: Idle delay before an edit triggers a query
            page_size: Row cap for the unfiltered query
        """
        self._store = store
        self._scheduler = scheduler
        self._debounce_ms = debounce_ms
        self._page_size = page_size

        self._filter_row = FilterRow()
        self._records: List[Record] = []
        self._listeners: List[RowsListener] = []
        self._error_listeners: List[Callable[[StoreError], None]] = []

        # Debounce state
        self._edit_count = 0
        self._committed = False
        self._pending_task: Optional[ScheduledTask] = None
        self._pending_edits: Dict[RecordField, str] = {}

        self._query_count = 0

    # ----- state -----

    @property
    def filter_row(self) -> FilterRow:
        """The filter row (always rows[0])."""
        return self._filter_row

    @property
    def rows(self) -> List[Row]:
        """Displayed list: the filter row followed by the matching records."""
        return [self._filter_row, *self._records]

    @property
    def records(self) -> List[Record]:
        """Matching records without the filter row."""
        return list(self._records)

    @property
    def edit_count(self) -> int:
        """Number of edits seen so far."""
        return self._edit_count

    @property
    def query_count(self) -> int:
        """Number of queries run so far."""
        return self._query_count

    @property
    def has_pending_edit(self) -> bool:
        """True while an idle task is waiting."""
        return self._pending_task is not None and self._pending_task.active

    @property
    def debounce_ms(self) -> int:
        return self._debounce_ms

    def pattern(self, field: RecordField) -> str:
        """Current text of a filter field, including edits not yet applied."""
        return self._pending_edits.get(field, self._filter_row.get(field))

    def add_listener(self, listener: RowsListener) -> None:
        """Register a callback invoked with the new rows after every query."""
        self._listeners.append(listener)

    def remove_listener(self, listener: RowsListener) -> None:
        """Unregister a rows callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def add_error_listener(self, listener: Callable[[StoreError], None]) -> None:
        """Register a callback for store failures of timer-driven queries.

        Without error listeners such failures propagate out of the timer
        callback.
        """
        self._error_listeners.append(listener)

    # ----- filter row editing -----

    def edit(self, field: RecordField, text: str) -> EditToken:
        """Record a keystroke in a filter cell and restart the idle timer.

        Args:
            field: Edited column
            text: Full editor text after the keystroke

        Returns:
            Edit token captured by the scheduled idle task
        """
        self._edit_count += 1
        token = EditToken(self._edit_count)
        self._committed = False
        self._pending_edits[field] = text
        self._cancel_pending()

        self._pending_task = self._scheduler.schedule(
            self._debounce_ms, lambda: self._on_idle(token)
        )
        logger.trace(f"Edit #{token} on {field.value}: {text!r}")
        return token

    def end_edit(self, field: RecordField, text: str) -> None:
        """Store the editor text when the editor closes without Enter.

        The idle task, if still pending, runs the query as usual.
        """
        self._pending_edits.pop(field, None)
        self._filter_row.set(field, text)

    def commit(self, field: Optional[RecordField] = None, text: Optional[str] = None) -> List[Row]:
        """Apply the filter now, bypassing the idle delay (Enter key).

        Args:
            field: Column being edited, if any
            text: Editor text for that column

        Returns:
            The new displayed rows
        """
        if field is not None and text is not None:
            self._pending_edits[field] = text
        logger.debug("Commit requested, querying immediately")
        return self._run_now()

    def clear(self, field: RecordField) -> List[Row]:
        """Clear one filter field and query immediately."""
        self._pending_edits.pop(field, None)
        self._filter_row.clear(field)
        logger.debug(f"Cleared filter on {field.value}")
        return self._run_now()

    def clear_all(self) -> List[Row]:
        """Clear every filter field and query immediately."""
        self._pending_edits.clear()
        self._filter_row.clear_all()
        logger.debug("Cleared all filters")
        return self._run_now()

    def _run_now(self) -> List[Row]:
        self._committed = True
        self._cancel_pending()
        self._apply_pending_edits()
        return self.query()

    def _cancel_pending(self) -> None:
        if self._pending_task is not None:
            self._pending_task.cancel()
            self._pending_task = None

    def _apply_pending_edits(self) -> None:
        for field, text in self._pending_edits.items():
            self._filter_row.set(field, text)
        self._pending_edits.clear()

    def _on_idle(self, token: EditToken) -> None:
        """Idle timer expiry for the edit that produced ``token``."""
        if self._committed:
            logger.trace(f"Idle #{token} ignored: already committed")
            return
        if token != self._edit_count:
            logger.trace(f"Idle #{token} ignored: superseded by #{self._edit_count}")
            return

        self._pending_task = None
        self._apply_pending_edits()
        try:
            self.query()
        except StoreError as e:
            if not self._error_listeners:
                raise
            for listener in list(self._error_listeners):
                listener(e)

    # ----- querying -----

    def initialize(self) -> List[Row]:
        """Run the first, unfiltered query."""
        return self.query()

    def query(self) -> List[Row]:
        """Re-run the store query and replace the displayed records.

        Returns:
            The new displayed rows

        Raises:
            StoreError: If the store query fails; displayed rows stay unchanged
        """
        criteria = self._filter_row.criteria()
        try:
            records = self._store.query(criteria, self._page_size)
        except StoreError as e:
            logger.error(f"Filter query failed: {e}")
            raise

        self._records = records
        self._query_count += 1
        logger.debug(
            f"Query #{self._query_count} with {len(criteria.active())} active filter(s) "
            f"returned {len(records)} record(s)"
        )

        rows = self.rows
        for listener in list(self._listeners):
            listener(rows)
        return rows
