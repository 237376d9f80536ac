from pathlib import Path

import pytest

from wayfinder.recommendations.config import DEFAULT_CATALOG_CONFIG
from wayfinder.recommendations.data_store import (
    CatalogError,
    clear_catalog,
    find_destination,
    get_catalog,
    load_catalog,
)
from wayfinder.recommendations.models import BudgetTier, Interest

HEADER = "id,name,country,budget,best_months,interests,image_url,description\n"


def _write(tmp_path: Path, rows: str) -> Path:
    path = tmp_path / "destinations.csv"
    path.write_text(HEADER + rows)
    return path


def test_load_catalog_parses_list_cells(tmp_path: Path):
    path = _write(
        tmp_path,
        'lisbon,Lisbon,Portugal,Budget,"April, May , June","Food, History, Food",,Tiled streets\n',
    )
    (lisbon,) = load_catalog(path)
    assert lisbon.id == "lisbon"
    assert lisbon.budget is BudgetTier.budget
    assert lisbon.best_months == ("April", "May", "June")
    assert lisbon.interests == (Interest.food, Interest.history)
    assert lisbon.image_url == ""


def test_load_catalog_keeps_file_order(tmp_path: Path):
    path = _write(
        tmp_path,
        "b,B,,Mid,June,Beach,,\n"
        "a,A,,Luxury,July,Hiking,,\n",
    )
    assert [d.id for d in load_catalog(path)] == ["b", "a"]


def test_load_catalog_allows_empty_lists(tmp_path: Path):
    path = _write(tmp_path, "x,X,,Mid,,,,\n")
    (dest,) = load_catalog(path)
    assert dest.best_months == ()
    assert dest.interests == ()


def test_load_catalog_rejects_duplicate_ids(tmp_path: Path):
    path = _write(tmp_path, "x,X,,Mid,June,Beach,,\nx,Y,,Mid,June,Beach,,\n")
    with pytest.raises(CatalogError, match="duplicate"):
        load_catalog(path)


def test_load_catalog_rejects_unknown_tier(tmp_path: Path):
    path = _write(tmp_path, "x,X,,Cheap,June,Beach,,\n")
    with pytest.raises(CatalogError, match=":2:"):
        load_catalog(path)


def test_load_catalog_rejects_missing_columns(tmp_path: Path):
    path = tmp_path / "broken.csv"
    path.write_text("id,name\nx,X\n")
    with pytest.raises(CatalogError, match="budget"):
        load_catalog(path)


def test_bundled_catalog_loads():
    clear_catalog()
    catalog = get_catalog()
    assert DEFAULT_CATALOG_CONFIG.catalog_path.is_file()
    assert len(catalog) >= 10
    assert len({d.id for d in catalog}) == len(catalog)
    assert get_catalog() is catalog


def test_find_destination():
    catalog = get_catalog()
    first = catalog[0]
    assert find_destination(first.id) == first
    assert find_destination("nowhere", catalog) is None
