"""Integrity checks for the railway stations dataset."""

from __future__ import annotations

from station_qa.core.config import DEFAULT_CONFIG, ValidationConfig
from station_qa.io import StationDataset, read_stations_csv
from station_qa.rules import RuleEngine, validate
from station_qa.text.slug import normalize

__all__ = [
    "DEFAULT_CONFIG",
    "ValidationConfig",
    "StationDataset",
    "read_stations_csv",
    "RuleEngine",
    "validate",
    "normalize",
]

__version__ = "0.1.0"
