"""Pydantic models and table schema validators.

These are contracts to keep validation runs deterministic:
- The loader checks the header against `STATIONS` at the file boundary.
- Rules report `Violation`s; the engine collects them into a `ValidationReport`.
"""

from __future__ import annotations

from station_qa.models.schemas import (
    STATIONS,
    RuleResult,
    TableSchema,
    ValidationReport,
    Violation,
    stations_schema,
)
from station_qa.models.validate import conform_df, validate_header

__all__ = [
    "TableSchema",
    "stations_schema",
    "STATIONS",
    "Violation",
    "RuleResult",
    "ValidationReport",
    "validate_header",
    "conform_df",
]
