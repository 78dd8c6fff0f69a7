"""Record store."""

from filter_grid.infrastructure.store.record_store import RecordStore

__all__ = ["RecordStore"]
