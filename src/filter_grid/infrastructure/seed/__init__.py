"""Seed data loading."""

from filter_grid.infrastructure.seed.yaml_loader import (
    DEFAULT_DESCRIPTIONS,
    default_records,
    load_seed_file,
)

__all__ = [
    "DEFAULT_DESCRIPTIONS",
    "default_records",
    "load_seed_file",
]
