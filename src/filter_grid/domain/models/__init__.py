"""Domain models."""

from filter_grid.domain.models.record import Record, StrictModel, generate_code
from filter_grid.domain.models.filter import FilterCriteria, FilterRow

__all__ = [
    "Record",
    "StrictModel",
    "generate_code",
    "FilterCriteria",
    "FilterRow",
]
