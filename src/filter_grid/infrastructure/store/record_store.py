"""In-memory relational record store backed by sqlite3."""

import sqlite3
from typing import Iterable, List, Optional

from filter_grid.domain.models import FilterCriteria, Record
from filter_grid.domain.services import build_query
from filter_grid.infrastructure.logging import get_logger
from filter_grid.shared.exceptions import DuplicateRecordError, StoreError
from filter_grid.shared.types import DEFAULT_PAGE_SIZE, TABLE_NAME, RecordField

logger = get_logger(__name__)


class RecordStore:
    """Ephemeral record table queried with filter criteria.

    The store is owned by the GUI thread; sqlite's same-thread check is left
    enabled so misuse from another thread fails loudly.
    """

    def __init__(self, database: str = ":memory:", table: str = TABLE_NAME):
        """Open the store.

        Args:
            database: sqlite database path (default: in-memory)
            table: Table name
        """
        self._table = table
        try:
            self._conn = sqlite3.connect(database)
        except sqlite3.Error as e:
            raise StoreError(f"Failed to open store {database}: {e}", database=database) from e
        self._columns = [f.column for f in RecordField]

    def __enter__(self) -> 'RecordStore':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as e:
            logger.error(f"Store error running {sql!r}: {e}")
            raise StoreError(f"Store query failed: {e}", sql=sql) from e

    def create_table(self) -> None:
        """Create the records table if it does not exist."""
        self._execute(
            f"CREATE TABLE IF NOT EXISTS {self._table} ("
            f"{RecordField.CODE.column} TEXT PRIMARY KEY, "
            f"{RecordField.DESCRIPTION.column} TEXT NOT NULL DEFAULT '')"
        )
        self._conn.commit()

    def insert(self, record: Record) -> None:
        """Insert a single record.

        Args:
            record: Record to insert

        Raises:
            DuplicateRecordError: If the code already exists
        """
        self.insert_many([record])

    def insert_many(self, records: Iterable[Record]) -> int:
        """Insert records in one transaction.

        Args:
            records: Records to insert

        Returns:
            Number of records inserted

        Raises:
            DuplicateRecordError: If any code already exists; nothing is inserted
        """
        placeholders = ", ".join("?" for _ in self._columns)
        sql = f"INSERT INTO {self._table} ({', '.join(self._columns)}) VALUES ({placeholders})"
        rows = [record.to_row() for record in records]
        try:
            with self._conn:
                self._conn.executemany(sql, rows)
        except sqlite3.IntegrityError as e:
            raise DuplicateRecordError(f"Duplicate record code: {e}") from e
        except sqlite3.Error as e:
            logger.error(f"Store error inserting records: {e}")
            raise StoreError(f"Insert failed: {e}", sql=sql) from e

        logger.debug(f"Inserted {len(rows)} record(s)")
        return len(rows)

    def query(
        self,
        criteria: Optional[FilterCriteria] = None,
        page_size: int = DEFAULT_PAGE_SIZE
    ) -> List[Record]:
        """Query records matching the filter criteria.

        Matching is case-insensitive for ASCII letters only (SQLite LIKE).

        Args:
            criteria: Filter patterns (default: no filter)
            page_size: Row cap for the unfiltered query

        Returns:
            Matching records in store order
        """
        query = build_query(criteria or FilterCriteria(), self._table, page_size)
        logger.debug(f"Query: {query.sql} {query.params}")
        cursor = self._execute(query.sql, query.params)
        return [Record(**dict(zip(self._columns, row))) for row in cursor.fetchall()]

    def get(self, code: str) -> Optional[Record]:
        """Get a record by code."""
        cursor = self._execute(
            f"SELECT {', '.join(self._columns)} FROM {self._table} "
            f"WHERE {RecordField.CODE.column} = ?",
            (code,)
        )
        row = cursor.fetchone()
        return Record(**dict(zip(self._columns, row))) if row else None

    def count(self) -> int:
        """Count stored records."""
        return self._execute(f"SELECT COUNT(*) FROM {self._table}").fetchone()[0]

    def close(self) -> None:
        """Close the connection."""
        self._conn.close()
