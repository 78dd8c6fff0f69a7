"""Filter row and filter criteria models.

The filter row is the synthetic first row of the grid. It has the shape of a
``Record`` but every field holds a substring pattern instead of data, and it
is never written to the store. ``FilterCriteria`` is the immutable snapshot
of those patterns that gets handed to the query builder.
"""

from typing import Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict

from filter_grid.shared.types import RecordField


class FilterCriteria(BaseModel):
    """Immutable per-column substring patterns (empty = no filter)."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str = ""
    description: str = ""

    def pattern(self, field: RecordField) -> str:
        """Get the pattern for a field."""
        return getattr(self, field.value)

    def active(self) -> List[Tuple[RecordField, str]]:
        """Get (field, pattern) pairs that actually filter, in column order."""
        return [
            (field, self.pattern(field))
            for field in RecordField
            if self.pattern(field)
        ]

    @property
    def is_empty(self) -> bool:
        """True when no field filters anything."""
        return not self.active()

    def with_pattern(self, field: RecordField, text: str) -> 'FilterCriteria':
        """Return a copy with one field's pattern replaced."""
        return self.model_copy(update={field.value: text})

    def without(self, field: RecordField) -> 'FilterCriteria':
        """Return a copy with one field's constraint dropped."""
        return self.with_pattern(field, "")


class FilterRow:
    """Mutable filter row pinned at index 0 of the displayed list."""

    def __init__(self):
        self._patterns: Dict[RecordField, str] = {f: "" for f in RecordField}

    def __repr__(self) -> str:
        return f"FilterRow({self.criteria()!r})"

    def __iter__(self) -> Iterator[Tuple[RecordField, str]]:
        return iter(self._patterns.items())

    def get(self, field: RecordField) -> str:
        """Get the current pattern for a field."""
        return self._patterns[field]

    def set(self, field: RecordField, text: str) -> None:
        """Set the pattern for a field."""
        self._patterns[field] = text or ""

    def clear(self, field: RecordField) -> None:
        """Clear one field."""
        self._patterns[field] = ""

    def clear_all(self) -> None:
        """Clear every field."""
        for field in self._patterns:
            self._patterns[field] = ""

    @property
    def is_empty(self) -> bool:
        """True when no pattern is set."""
        return self.criteria().is_empty

    def criteria(self) -> FilterCriteria:
        """Snapshot the current patterns."""
        return FilterCriteria(**{f.value: text for f, text in self._patterns.items()})
