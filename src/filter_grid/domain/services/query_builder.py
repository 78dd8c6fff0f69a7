"""Translate filter criteria into a parameterised SQL query."""

from dataclasses import dataclass
from typing import Tuple

from filter_grid.domain.models.filter import FilterCriteria
from filter_grid.shared.types import DEFAULT_PAGE_SIZE, TABLE_NAME, RecordField

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class Query:
    """SQL text plus bound parameters."""
    sql: str
    params: Tuple[object, ...] = ()


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_query(
    criteria: FilterCriteria,
    table: str = TABLE_NAME,
    page_size: int = DEFAULT_PAGE_SIZE
) -> Query:
    """Build the query for the current filter state.

    Every active field contributes a case-insensitive substring predicate,
    ANDed together. Without any active field the first page of the table is
    returned instead.

    Args:
        criteria: Filter patterns
        table: Table name
        page_size: Row cap for the unfiltered query

    Returns:
        Query with bound parameters
    """
    columns = ", ".join(f.column for f in RecordField)
    active = criteria.active()

    if not active:
        return Query(
            f"SELECT {columns} FROM {table} ORDER BY rowid LIMIT ?",
            (page_size,)
        )

    predicates = []
    params = []
    for field, pattern in active:
        predicates.append(f"{field.column} LIKE ? ESCAPE '{LIKE_ESCAPE}'")
        params.append(f"%{escape_like(pattern)}%")

    where = " AND ".join(predicates)
    return Query(
        f"SELECT {columns} FROM {table} WHERE {where} ORDER BY rowid",
        tuple(params)
    )
