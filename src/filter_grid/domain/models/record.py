"""Record model stored in the grid's backing table."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filter_grid.shared.types import RecordField


class StrictModel(BaseModel):
    """Base model with strict validation."""
    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        use_enum_values=False,
    )


def generate_code() -> str:
    """Generate a new 12-character uppercase record code."""
    return str(uuid.uuid4()).upper()[:12]


class Record(StrictModel):
    """A single row of the record store.

    Identity is the ``code``; the description is free text.
    """
    code: str = Field(default_factory=generate_code)
    description: str = ""

    @field_validator('code')
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Codes must not be blank."""
        if not v.strip():
            raise ValueError("Record code must not be empty")
        return v

    def get(self, field: RecordField) -> str:
        """Get the value of a column."""
        return getattr(self, field.value)

    def to_row(self) -> tuple[str, str]:
        """Convert to a store row (column order)."""
        return tuple(self.get(f) for f in RecordField)
