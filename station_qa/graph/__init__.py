"""Parent/child indexing of station records."""

from __future__ import annotations

from station_qa.graph.index import DatasetIndex, build_index

__all__ = ["DatasetIndex", "build_index"]
