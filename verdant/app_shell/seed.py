"""
Seed data loader.

Reads a YAML file mapping table names to rows and inserts them through a
backend, parents first so embedded lookups resolve.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from verdant.ports.backend import BackendPort, Row

logger = logging.getLogger(__name__)

TABLE_ORDER = ["categories", "products", "hero_slides"]


def load_seed(path: Path) -> dict[str, list[Row]]:
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found at: {path}")
    with open(path) as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in seed file: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Seed file must map table names to lists of rows")
    for table, rows in data.items():
        if not isinstance(rows, list):
            raise ValueError(f"Seed table '{table}' must be a list of rows")
    return data


def apply_seed(backend: BackendPort, data: dict[str, list[Row]]) -> dict[str, int]:
    """Insert seed rows. Returns the number of rows inserted per table."""
    ordered = [t for t in TABLE_ORDER if t in data] + [t for t in data if t not in TABLE_ORDER]
    counts: dict[str, int] = {}
    for table in ordered:
        for row in data[table]:
            backend.insert(table, row)
        counts[table] = len(data[table])
        logger.info("Seeded %d rows into %s", counts[table], table)
    return counts
