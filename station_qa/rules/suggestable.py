"""Rules that only apply to suggestable stations (shown in search/autocomplete)."""

from __future__ import annotations

from collections.abc import Iterator

from station_qa.core.config import ValidationConfig
from station_qa.graph.index import DatasetIndex, is_set, is_true
from station_qa.io import StationDataset
from station_qa.models.schemas import Violation
from station_qa.rules.base import Row, check_each
from station_qa.rules.carriers import has_enabled_carrier
from station_qa.text.slug import normalize


def suggestable(index: DatasetIndex) -> list[Row]:
    return [row for row in index.records if is_true(row.get("is_suggestable"))]


def check_has_name(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        if not is_set(row.get("name")):
            yield f"Station {row.get('id')} is suggestable but has empty name"

    return check_each("suggestable_has_name", suggestable(index), _row)


def check_name_unique(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    names: set[str] = set()

    def _row(row: Row) -> Iterator[str]:
        name = row.get("name")
        if not is_set(name):
            return
        if name in names:
            yield f"Duplicate name {name!r} (station {row.get('id')})"
        names.add(name)

    return check_each("suggestable_name_unique", suggestable(index), _row)


def check_info_differs_from_name(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        name = row.get("name")
        if not is_set(name):
            return
        for locale in config.locales:
            if row.get(f"info:{locale}") == name:
                yield f"Name and info:{locale} of station {row.get('id')} should be different: {name!r}"

    return check_each("info_differs_from_name", suggestable(index), _row)


def check_has_carrier(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    """A suggestable station, or one of its direct children, has an enabled carrier."""

    def _row(row: Row) -> Iterator[str]:
        if has_enabled_carrier(row, config):
            return
        if any(has_enabled_carrier(child, config) for child in index.children(row.get("id"))):
            return
        yield f"Station {row.get('id')} is suggestable but has no enabled system"

    return check_each("suggestable_has_carrier", suggestable(index), _row)


def check_parent_station(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        parent_id = row.get("parent_station_id")
        if not is_set(parent_id):
            return
        parent = index.by_id.get(parent_id)
        if parent is None:
            yield f"Station {row.get('id')} references a not existing parent station ({parent_id})"
        elif not is_set(parent.get("name")):
            yield f"The station {parent_id} has no name (parent of station {row.get('id')})"

    return check_each("parent_station", suggestable(index), _row)


def check_slug_matches_name(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        name = row.get("name")
        if not is_set(name):
            # reported by suggestable_has_name
            return
        expected = normalize(name)
        if row.get("slug") != expected:
            yield f"Station {row.get('id')} has not a correct slug: {row.get('slug')!r} (expected {expected!r})"

    return check_each("slug_matches_name", suggestable(index), _row)


def check_slug_unique(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    slugs: set[str] = set()

    def _row(row: Row) -> Iterator[str]:
        slug = row.get("slug")
        if not is_set(slug):
            return
        if slug in slugs:
            yield f"Duplicated slug {slug!r} for station {row.get('id')}"
        slugs.add(slug)

    return check_each("slug_unique", suggestable(index), _row)


def check_meta_station_children(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    """A suggestable meta-station needs enough suggestable children."""
    minimum = config.meta_station_min_children
    parents = index.parents
    # file order
    meta_stations = [row for pid, row in index.by_id.items() if pid in parents]

    def _row(row: Row) -> Iterator[str]:
        if not is_true(row.get("is_suggestable")):
            return
        count = index.suggestable_children_count(row.get("id"))
        if count < minimum:
            yield f"The meta station {row.get('id')} is suggestable and has only {count} child."

    return check_each("meta_station_children", meta_stations, _row)
