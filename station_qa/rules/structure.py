"""Table-level rules: header, arity, ordering and identifier uniqueness."""

from __future__ import annotations

import logging

import pandas as pd

from station_qa.core.config import ValidationConfig
from station_qa.graph.index import DatasetIndex
from station_qa.io import StationDataset
from station_qa.models.schemas import Violation, stations_schema
from station_qa.models.validate import validate_header

LOGGER = logging.getLogger(__name__)


def check_header(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    problems = validate_header(dataset.header, stations_schema(config))
    return [Violation(rule="header", message=p) for p in problems]


def check_arity(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    expected = config.expected_columns
    ids = dataset.frame["id"]
    out = []
    for i, count in enumerate(dataset.field_counts):
        if count != expected:
            sid = None if pd.isna(ids.iloc[i]) else str(ids.iloc[i])
            out.append(
                Violation(
                    rule="arity",
                    station_id=sid,
                    message=f"Wrong number of columns {count} (expected {expected}) "
                    f"for station {sid} (line {dataset.line_of(i)})",
                )
            )
    return out


def check_id_unique(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    ids = dataset.frame["id"]
    out = []
    missing = ids.isna()
    for i in ids[missing].index:
        out.append(
            Violation(rule="id_unique", message=f"Station on line {dataset.line_of(i)} has no id")
        )

    dupes = ids[~missing & ids.duplicated(keep="first")]
    for sid in dupes:
        out.append(
            Violation(rule="id_unique", station_id=str(sid), message=f"Duplicated id {sid}")
        )
    return out


def check_uic_unique(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    frame = dataset.frame[dataset.frame["uic"].notna()]
    counts = frame["uic"].value_counts()
    duplicated = counts[counts > 1]
    out = []
    for uic, n in duplicated.sort_index().items():
        station_ids = frame.loc[frame["uic"] == uic, "id"].dropna().astype(str).tolist()
        out.append(
            Violation(
                rule="uic_unique",
                station_id=station_ids[0] if station_ids else None,
                message=f"Station with UIC {uic} is duplicated ({n} stations: {', '.join(station_ids)})",
            )
        )
    if out and not config.uic_duplicates_fatal:
        LOGGER.warning("%d duplicated UIC codes (informational)", len(out))
    return out


def check_sorted_by_id(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    """Ids, read as integers, must be non-decreasing in file order."""
    ids = dataset.frame["id"]
    numeric = pd.to_numeric(ids, errors="coerce")
    out = []

    not_integer = ids.notna() & (numeric.isna() | (numeric % 1 != 0))
    for sid in ids[not_integer]:
        out.append(
            Violation(
                rule="sorted_by_id", station_id=str(sid), message=f"Id {sid!r} is not an integer"
            )
        )

    usable = ids.notna() & ~not_integer
    previous = None
    for sid, value in zip(ids[usable], numeric[usable]):
        if previous is not None and value < previous[1]:
            out.append(
                Violation(
                    rule="sorted_by_id",
                    station_id=str(sid),
                    message=f"The data is not sorted by the id column: {sid} after {previous[0]}",
                )
            )
        else:
            previous = (sid, value)
    return out
