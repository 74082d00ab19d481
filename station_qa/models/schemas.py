"""Schema definitions for the stations table and validation results.

This module contains only:
- `TableSchema` (schema metadata container) and `stations_schema`
- result models (`Violation`, `RuleResult`, `ValidationReport`)
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field, computed_field

from station_qa.core.config import DEFAULT_CONFIG, ValidationConfig


class TableSchema(BaseModel):
    """A simple schema for a delimited table (column-level contract)."""

    name: str
    required_columns: tuple[str, ...] = Field(default_factory=tuple)
    optional_columns: tuple[str, ...] = Field(default_factory=tuple)
    # pandas dtype strings, e.g. "string", "Float64", "boolean"
    dtypes: Mapping[str, str] = Field(default_factory=dict)

    def allowed_columns(self) -> set[str]:
        return set(self.required_columns) | set(self.optional_columns)

    def columns(self) -> tuple[str, ...]:
        return self.required_columns + self.optional_columns


_LEADING_COLUMNS: tuple[str, ...] = (
    "id",
    "name",
    "slug",
    "uic",
    "uic8_sncf",
    "longitude",
    "latitude",
    "parent_station_id",
    "is_city",
    "country",
    "is_main_station",
    "time_zone",
    "is_suggestable",
)


def stations_schema(config: ValidationConfig = DEFAULT_CONFIG) -> TableSchema:
    """Build the stations table schema for the configured carriers and locales."""
    carrier_columns: list[str] = []
    for carrier in config.carriers:
        carrier_columns += [carrier.id_column, carrier.enabled_column]
    info_columns = [f"info:{locale}" for locale in config.locales]

    required = _LEADING_COLUMNS + tuple(carrier_columns) + tuple(info_columns)
    # Every column is read as text; the rules interpret values themselves.
    return TableSchema(
        name="stations",
        required_columns=required,
        optional_columns=("same_as",),
        dtypes={c: "string" for c in required + ("same_as",)},
    )


STATIONS = stations_schema()


class Violation(BaseModel):
    """One offending record for one rule."""

    rule: str
    station_id: str | None = None
    message: str


class RuleResult(BaseModel):
    rule: str
    description: str = ""
    fatal: bool = True
    violations: list[Violation] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.violations


class ValidationReport(BaseModel):
    records: int = 0
    results: list[RuleResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        """True when no fatal rule reported a violation."""
        return all(r.passed for r in self.results if r.fatal)

    def failed(self) -> list[RuleResult]:
        return [r for r in self.results if not r.passed]

    def result(self, rule: str) -> RuleResult:
        for r in self.results:
            if r.rule == rule:
                return r
        raise KeyError(rule)
