"""Per-record field rules (flags, country, time zone, coordinates, codes)."""

from __future__ import annotations

import re
from collections.abc import Iterator

from station_qa.core.config import ValidationConfig
from station_qa.geo.bbox import bbox_polygon, parse_coordinate, strictly_within
from station_qa.graph.index import DatasetIndex, is_set, is_true
from station_qa.io import StationDataset
from station_qa.models.schemas import Violation
from station_qa.rules.base import Row, check_each
from station_qa.rules.carriers import FLAG_VALUES

COUNTRY_PATTERN = re.compile(r"[A-Z]{2}")

# idtgv ids are the 3rd to 6th characters of the sncf id
IDTGV_SLICE = slice(2, 6)


def _flag_domain(column: str):
    rule = f"{column}_domain"

    def check(
        dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
    ) -> list[Violation]:
        def _row(row: Row) -> Iterator[str]:
            if row.get(column) not in FLAG_VALUES:
                yield f"Invalid value for {column} for station {row.get('id')}: {row.get(column)!r}"

        return check_each(rule, index.records, _row)

    return check


check_is_suggestable = _flag_domain("is_suggestable")
check_is_main_station = _flag_domain("is_main_station")


def check_country(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    match = COUNTRY_PATTERN.fullmatch if config.country_full_match else COUNTRY_PATTERN.search

    def _row(row: Row) -> Iterator[str]:
        country = row.get("country")
        if not is_set(country) or match(country) is None:
            yield f"Invalid country for station {row.get('id')}: {country!r}"

    return check_each("country", index.records, _row)


def check_time_zone(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        if not is_set(row.get("time_zone")):
            yield f"No timezone for station {row.get('id')}"

    return check_each("time_zone", index.records, _row)


def check_coordinates(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    area = bbox_polygon(config.bbox)

    def _row(row: Row) -> Iterator[str]:
        sid = row.get("id")
        lon, lat = row.get("longitude"), row.get("latitude")
        if is_set(lon) and not is_set(lat):
            yield f"Longitude of station {sid} set, but not latitude"
        if is_set(lat) and not is_set(lon):
            yield f"Latitude of station {sid} set, but not longitude"
        if is_true(row.get("is_suggestable")) and not (is_set(lon) and is_set(lat)):
            yield f"Station {sid} is suggestable but has no coordinates"

        if is_set(lon) and is_set(lat):
            try:
                x, y = parse_coordinate(lon), parse_coordinate(lat)
            except ValueError:
                yield f"Coordinates of station {sid} are not numbers: ({lon!r}, {lat!r})"
                return
            if not strictly_within(area, x, y):
                yield f"Coordinates of station {sid} not within the bounding box: ({x}, {y})"

    return check_each("coordinates", index.records, _row)


def check_idtgv_matches_sncf(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        if not is_true(row.get("idtgv_is_enabled")):
            return
        sid = row.get("id")
        sncf_id = row.get("sncf_id")
        if not is_set(sncf_id):
            yield f"Station {sid} has idtgv enabled but no sncf_id"
        elif sncf_id[IDTGV_SLICE] != row.get("idtgv_id"):
            yield (
                f"Station {sid} mismatched sncf_id and idtgv_id: "
                f"{sncf_id!r} / {row.get('idtgv_id')!r}"
            )

    return check_each("idtgv_matches_sncf", index.records, _row)


def check_uic8_sncf(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        uic8 = row.get("uic8_sncf")
        if not is_set(uic8) or row.get("id") in config.uic8_whitelist_ids:
            return
        if row.get("uic") != uic8[:-1]:
            yield (
                f"Station {row.get('id')} has an incoherent uic8_sncf code: "
                f"uic={row.get('uic')!r}, uic8_sncf={uic8!r}"
            )

    return check_each("uic8_sncf", index.records, _row)
