"""
Shared pytest fixtures.

Stations are built from a valid suggestable template; tests override only the
fields they care about.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from station_qa.core.config import DEFAULT_CONFIG
from station_qa.graph.index import build_index
from station_qa.io import StationDataset, dataset_from_rows
from station_qa.models.schemas import STATIONS, Violation

HEADER: list[str] = list(STATIONS.columns())

TEMPLATE: dict[str, str] = {
    "id": "1",
    "name": "Paris Gare de Lyon",
    "slug": "paris-gare-de-lyon",
    "uic": "8768600",
    "uic8_sncf": "87686006",
    "longitude": "2.373481",
    "latitude": "48.844945",
    "is_city": "f",
    "country": "FR",
    "is_main_station": "t",
    "time_zone": "Europe/Paris",
    "is_suggestable": "t",
    "sncf_id": "FRPLY",
    "sncf_is_enabled": "t",
    "idtgv_is_enabled": "f",
    "db_is_enabled": "f",
    "idbus_is_enabled": "f",
    "ouigo_is_enabled": "f",
    "trenitalia_is_enabled": "f",
    "ntv_is_enabled": "f",
}


def station(**overrides: str | None) -> dict[str, str | None]:
    row: dict[str, str | None] = {c: None for c in HEADER}
    row.update(TEMPLATE)
    row.update(overrides)
    return row


def to_fields(row: dict[str, str | None]) -> list[str]:
    return [row.get(c) or "" for c in HEADER]


@pytest.fixture
def make_station() -> Callable[..., dict[str, str | None]]:
    """Factory: a valid suggestable station with `overrides` applied.

    Use `make_station(**{"info:fr": "..."})` for column names that are not identifiers.
    """
    return station


@pytest.fixture
def make_dataset() -> Callable[[list[dict[str, str | None]]], StationDataset]:
    def _make(rows: list[dict[str, str | None]]) -> StationDataset:
        return dataset_from_rows(HEADER, [to_fields(r) for r in rows])

    return _make


@pytest.fixture
def run_check(make_dataset) -> Callable[..., list[Violation]]:
    """Run one rule function over stations built with `make_station`."""

    def _run(check, rows, config=DEFAULT_CONFIG) -> list[Violation]:
        dataset = make_dataset(rows)
        return check(dataset, build_index(dataset.records()), config)

    return _run


@pytest.fixture
def valid_rows() -> list[dict[str, str | None]]:
    """A small dataset that passes every rule: one meta-station with two children."""
    return [
        station(
            id="10",
            name="Paris",
            slug="paris",
            uic=None,
            uic8_sncf=None,
            longitude="2.3488",
            latitude="48.85341",
            is_city="t",
            is_main_station="f",
            sncf_id=None,
            sncf_is_enabled="f",
        ),
        station(id="11", parent_station_id="10"),
        station(
            id="12",
            name="Paris Nord",
            slug="paris-nord",
            uic="8727100",
            uic8_sncf="87271007",
            longitude="2.355151",
            latitude="48.880185",
            sncf_id="FRPNO",
            parent_station_id="10",
            **{"info:fr": "Gare du Nord", "info:en": "North station"},
        ),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write `;`-separated lines (header first) to a temporary file."""

    def _write(lines: list[list[str]], name: str = "stations.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(";".join(fields) for fields in lines) + "\n", encoding=encoding)
        return path

    return _write
