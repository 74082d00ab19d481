"""Rule contract shared by the catalog and the engine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from station_qa.models.schemas import Violation

if TYPE_CHECKING:
    from station_qa.core.config import ValidationConfig
    from station_qa.graph.index import DatasetIndex
    from station_qa.io import StationDataset

LOGGER = logging.getLogger(__name__)

Row = Mapping[str, str | None]
RuleCheck = Callable[["StationDataset", "DatasetIndex", "ValidationConfig"], list[Violation]]


@dataclass(frozen=True)
class Rule:
    """A named, pure validation function.

    `fatal=False` rules are reported but never fail the run.
    """

    name: str
    check: RuleCheck
    fatal: bool = True
    description: str = ""

    def __call__(
        self, dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
    ) -> list[Violation]:
        return self.check(dataset, index, config)


def check_each(
    rule: str,
    rows: Iterable[Row],
    check: Callable[[Row], Iterator[str]],
) -> list[Violation]:
    """Run a per-record check that yields messages, over every row.

    An exception raised for one row becomes a violation for that row and the
    remaining rows are still checked.
    """
    out: list[Violation] = []
    for row in rows:
        station_id = row.get("id")
        try:
            for message in check(row):
                out.append(Violation(rule=rule, station_id=station_id, message=message))
        except Exception as exc:  # noqa: BLE001 - converted into a violation for this record
            LOGGER.warning("%s: station %s could not be checked: %s", rule, station_id, exc)
            out.append(
                Violation(
                    rule=rule,
                    station_id=station_id,
                    message=f"Station {station_id} could not be checked: {exc}",
                )
            )
    return out
