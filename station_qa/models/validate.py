"""Validation utilities for the stations table contract."""

from __future__ import annotations

import pandas as pd

from station_qa.models.schemas import TableSchema


def validate_header(
    header: tuple[str, ...] | list[str],
    schema: TableSchema,
    *,
    allow_extra_columns: bool = False,
) -> list[str]:
    """Compare a header row to a schema. Returns one message per problem (empty when valid)."""
    problems: list[str] = []

    missing = [c for c in schema.required_columns if c not in header]
    if missing:
        problems.append(f"{schema.name}: missing required columns: {missing}")

    if not allow_extra_columns:
        allowed = schema.allowed_columns()
        extra = [c for c in header if c not in allowed]
        if extra:
            problems.append(f"{schema.name}: unexpected columns: {extra}")

    seen: set[str] = set()
    duplicated = []
    for c in header:
        if c in seen:
            duplicated.append(c)
        seen.add(c)
    if duplicated:
        problems.append(f"{schema.name}: duplicated columns: {duplicated}")

    return problems


def conform_df(df: pd.DataFrame, schema: TableSchema) -> pd.DataFrame:
    """Return a copy with every schema column present and typed.

    Missing schema columns are added as all-NA so rules reading named fields
    keep working on a drifted file; extra columns are kept.
    """
    out = df.copy()
    for col in schema.columns():
        if col not in out.columns:
            out[col] = pd.NA

    for col, dtype in schema.dtypes.items():
        if col in out.columns:
            out[col] = out[col].astype(dtype)

    # Empty fields are absent values.
    return out.replace("", pd.NA)
