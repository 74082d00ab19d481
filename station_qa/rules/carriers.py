"""Per-carrier `<carrier>_is_enabled` / `<carrier>_id` consistency."""

from __future__ import annotations

from collections.abc import Iterator

from station_qa.core.config import CarrierSpec, ValidationConfig
from station_qa.graph.index import DatasetIndex, is_set, is_true
from station_qa.io import StationDataset
from station_qa.models.schemas import Violation
from station_qa.rules.base import Row, Rule, check_each

FLAG_VALUES = frozenset({"t", "f"})


def has_enabled_carrier(row: Row, config: ValidationConfig) -> bool:
    return any(is_true(row.get(c.enabled_column)) for c in config.carriers)


def carrier_rule(carrier: CarrierSpec) -> Rule:
    """Build the rule for one carrier.

    - enabled flag is `t` or `f`
    - enabled implies an id
    - id has the carrier's fixed length (when it has one)
    - non-empty ids are unique for the carrier
    """
    name = f"carrier:{carrier.name}"
    enabled_column = carrier.enabled_column
    id_column = carrier.id_column

    def check(
        dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
    ) -> list[Violation]:
        seen: set[str] = set()

        def _row(row: Row) -> Iterator[str]:
            sid = row.get("id")
            enabled = row.get(enabled_column)
            if enabled not in FLAG_VALUES:
                yield f"Invalid {enabled_column} {enabled!r} for station {sid}"

            carrier_id = row.get(id_column)
            if is_true(enabled) and not is_set(carrier_id):
                yield f"Missing {id_column} for station {sid}"

            if is_set(carrier_id):
                if carrier.id_length is not None and len(carrier_id) != carrier.id_length:
                    yield f"Invalid {id_column}: {carrier_id} for station {sid}"
                if carrier_id in seen:
                    yield f"Duplicated {id_column} {carrier_id} for station {sid}"
                seen.add(carrier_id)

        return check_each(name, index.records, _row)

    return Rule(
        name=name,
        check=check,
        description=f"{carrier.name} enabled flag and id are consistent and ids are unique",
    )
