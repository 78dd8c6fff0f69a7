"""Core type definitions used throughout the application."""

from enum import Enum
from typing import NewType, Callable, TypeAlias

EditToken = NewType('EditToken', int)     # Value of the edit counter at keystroke time

# Default behaviour
DEFAULT_DEBOUNCE_MS = 250
DEFAULT_PAGE_SIZE = 100
TABLE_NAME = "records"


class RecordField(str, Enum):
    """Filterable record columns, in display order."""
    CODE = "code"
    DESCRIPTION = "description"

    @property
    def column(self) -> str:
        """SQL column name."""
        return self.value

    @property
    def header(self) -> str:
        """Default header text."""
        return _HEADERS[self]

    @classmethod
    def from_index(cls, index: int) -> 'RecordField':
        """Get the field shown in the given grid column."""
        return list(cls)[index]

    def column_index(self) -> int:
        """Grid column of this field."""
        return list(RecordField).index(self)


_HEADERS = {
    RecordField.CODE: "Code",
    RecordField.DESCRIPTION: "Formal Title",
}

RowsListener: TypeAlias = Callable[[list], None]
