"""Lookup structures shared read-only by every rule.

Built once per run from the ordered records:
- `by_id`: first record for each id (duplicates are reported by a rule, not here)
- `children_of`: records referencing each id as `parent_station_id`, in file order
- `suggestable_children_count_of`: how many of those children are suggestable
- `hierarchy`: parent -> child `DiGraph` over station ids
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import networkx as nx

LOGGER = logging.getLogger(__name__)


def is_set(value: object) -> bool:
    """A field is present when it is a non-empty string."""
    return isinstance(value, str) and value != ""


def is_true(value: object) -> bool:
    return value == "t"


@dataclass(frozen=True)
class DatasetIndex:
    records: tuple[Mapping[str, str | None], ...]
    by_id: Mapping[str, Mapping[str, str | None]]
    children_of: Mapping[str, tuple[Mapping[str, str | None], ...]]
    suggestable_children_count_of: Mapping[str, int]
    hierarchy: nx.DiGraph

    @property
    def parents(self) -> set[str]:
        """Ids referenced as a parent by at least one record (meta-stations)."""
        return {pid for pid, children in self.children_of.items() if children}

    def children(self, station_id: str) -> tuple[Mapping[str, str | None], ...]:
        return self.children_of.get(station_id, ())

    def suggestable_children_count(self, station_id: str) -> int:
        return self.suggestable_children_count_of.get(station_id, 0)


def build_index(records: Iterable[Mapping[str, str | None]]) -> DatasetIndex:
    """Index an ordered sequence of station records (pure, no validation)."""
    rows = tuple(records)

    by_id: dict[str, Mapping[str, str | None]] = {}
    children: dict[str, list[Mapping[str, str | None]]] = {}
    suggestable_count: dict[str, int] = {}
    G = nx.DiGraph()

    for row in rows:
        sid = row.get("id")
        if not is_set(sid):
            continue
        by_id.setdefault(sid, row)
        children.setdefault(sid, [])
        G.add_node(sid)

    for row in rows:
        parent_id = row.get("parent_station_id")
        if not is_set(parent_id):
            continue
        children.setdefault(parent_id, []).append(row)
        if is_true(row.get("is_suggestable")):
            suggestable_count[parent_id] = suggestable_count.get(parent_id, 0) + 1
        child_id = row.get("id")
        if is_set(child_id):
            G.add_edge(parent_id, child_id)

    LOGGER.debug(
        "Indexed %d records: %d ids, %d parent links",
        len(rows),
        len(by_id),
        G.number_of_edges(),
    )
    return DatasetIndex(
        records=rows,
        by_id=by_id,
        children_of={k: tuple(v) for k, v in children.items()},
        suggestable_children_count_of=suggestable_count,
        hierarchy=G,
    )
