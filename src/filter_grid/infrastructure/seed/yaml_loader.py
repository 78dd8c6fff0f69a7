"""Seed records for the store, built in or loaded from YAML.

Expected YAML layout::

    records:
      - description: The Quick Brown
      - code: ABC-1
        description: Quick Brown Fox

A bare list of entries is accepted too. ``code`` is optional and generated
when missing.
"""

from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from filter_grid.domain.models import Record
from filter_grid.infrastructure.logging import get_logger
from filter_grid.shared.exceptions import SeedError

logger = get_logger(__name__)


DEFAULT_DESCRIPTIONS = (
    "The Quick Brown",
    "Quick Brown Fox",
    "Brown Fox Jumps",
    "Fox Jumps Over",
    "Jumps Over The",
    "Over The Lazy",
    "The Lazy Dog",
)


def default_records() -> List[Record]:
    """Build the built-in sample records (fresh codes on every call)."""
    return [Record(description=text) for text in DEFAULT_DESCRIPTIONS]


def load_seed_file(path: Path) -> List[Record]:
    """Load seed records from a YAML file.

    Args:
        path: YAML file path

    Returns:
        Records in file order

    Raises:
        SeedError: If the file can't be read or an entry is invalid
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SeedError(f"Cannot read seed file {path}: {e}", file=str(path)) from e
    except yaml.YAMLError as e:
        raise SeedError(f"YAML syntax error in {path}: {e}", file=str(path)) from e

    if data is None:
        entries = []
    elif isinstance(data, dict):
        entries = data.get('records') or []
    else:
        entries = data

    if not isinstance(entries, list):
        raise SeedError(f"{path}: 'records' must be a list", file=str(path))

    records = []
    for index, entry in enumerate(entries):
        if isinstance(entry, str):
            entry = {'description': entry}
        if not isinstance(entry, dict):
            raise SeedError(
                f"{path}: entry {index} must be a mapping or string",
                file=str(path), index=index
            )
        try:
            records.append(Record(**{k: str(v) for k, v in entry.items() if v is not None}))
        except ValidationError as e:
            raise SeedError(
                f"{path}: invalid entry {index}: {e}",
                file=str(path), index=index
            ) from e

    logger.info(f"Loaded {len(records)} seed record(s) from {path}")
    return records
