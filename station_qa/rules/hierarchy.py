"""Parent/child structure: parent links resolve and form a forest."""

from __future__ import annotations

from collections.abc import Iterator

import networkx as nx

from station_qa.core.config import ValidationConfig
from station_qa.graph.index import DatasetIndex, is_set
from station_qa.io import StationDataset
from station_qa.models.schemas import Violation
from station_qa.rules.base import Row, check_each


def check_parent_hierarchy(
    dataset: StationDataset, index: DatasetIndex, config: ValidationConfig
) -> list[Violation]:
    def _row(row: Row) -> Iterator[str]:
        parent_id = row.get("parent_station_id")
        if is_set(parent_id) and parent_id not in index.by_id:
            yield f"Station {row.get('id')} references a not existing parent station ({parent_id})"

    out = check_each("parent_hierarchy", index.records, _row)

    G = index.hierarchy
    looped = set(u for u, _ in nx.selfloop_edges(G))
    for u in sorted(looped):
        out.append(
            Violation(
                rule="parent_hierarchy",
                station_id=u,
                message=f"Station {u} is its own parent",
            )
        )

    for cycle in nx.simple_cycles(G):
        if len(cycle) == 1 and cycle[0] in looped:
            continue
        first = min(cycle)
        out.append(
            Violation(
                rule="parent_hierarchy",
                station_id=first,
                message=f"Parent stations form a cycle: {' -> '.join(cycle + [cycle[0]])}",
            )
        )
    return out
