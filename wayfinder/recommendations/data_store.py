from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Destination

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = [
    "id",
    "name",
    "country",
    "budget",
    "best_months",
    "interests",
    "image_url",
    "description",
]
_LIST_COLUMNS = ("best_months", "interests")

_catalog: tuple[Destination, ...] | None = None


class CatalogError(ValueError):
    """Raised when the catalog file cannot be turned into destinations."""


def _split_cell(value: str, separator: str) -> list[str]:
    return [part.strip() for part in value.split(separator) if part.strip()]


def load_catalog(path: Path, config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Destination, ...]:
    """Read a catalog CSV into immutable destinations, keeping file order."""
    df = pd.read_csv(path, dtype=str).fillna("")

    missing = [c for c in ("id", "name", "budget") if c not in df.columns]
    if missing:
        raise CatalogError(f"{path}: missing required columns {missing}")

    for col in CATALOG_COLUMNS:
        if col not in df.columns:
            df[col] = ""

    # Pre-parse list cells, dropping repeats within a cell
    for col in _LIST_COLUMNS:
        df[col] = df[col].apply(
            lambda s: list(dict.fromkeys(_split_cell(s, config.list_separator)))
        )

    destinations: list[Destination] = []
    seen: set[str] = set()
    for row_number, record in enumerate(df[CATALOG_COLUMNS].to_dict("records"), start=2):
        record = {k: v.strip() if isinstance(v, str) else v for k, v in record.items()}
        if record["id"] in seen:
            raise CatalogError(f"{path}:{row_number}: duplicate destination id {record['id']!r}")
        try:
            destination = Destination(**record)
        except ValidationError as exc:
            raise CatalogError(f"{path}:{row_number}: invalid destination ({exc.error_count()} errors)") from exc
        seen.add(destination.id)
        destinations.append(destination)

    logger.info("Loaded %d destinations from %s", len(destinations), path)
    return tuple(destinations)


def get_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Destination, ...]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config.catalog_path, config)
    return _catalog


def find_destination(
    destination_id: str,
    catalog: tuple[Destination, ...] | None = None,
) -> Destination | None:
    for destination in catalog if catalog is not None else get_catalog():
        if destination.id == destination_id:
            return destination
    return None


def clear_catalog() -> None:
    global _catalog
    _catalog = None
