"""Lightweight I/O helpers.

This module centralises:
- the stations CSV reader (`read_stations_csv`) at the validation boundary
- YAML config loading (`load_validation_config`)
- simple JSON/text helpers used by scripts
"""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from station_qa.core.config import DEFAULT_CONFIG, DELIMITER, ENCODING, ValidationConfig
from station_qa.models.schemas import TableSchema, stations_schema
from station_qa.models.validate import conform_df

LOGGER = logging.getLogger(__name__)

Record = dict[str, str | None]


@dataclass(frozen=True)
class StationDataset:
    """A loaded stations file.

    `frame` holds one row per record with every schema column present
    (nullable `string` dtype, empty fields as NA). `field_counts` and
    `line_numbers` are aligned with the rows: how many fields each line
    actually carried and where it sits in the file (blank lines included).
    """

    header: tuple[str, ...]
    frame: pd.DataFrame
    field_counts: tuple[int, ...]
    line_numbers: tuple[int, ...]
    source: str = "<memory>"

    def __len__(self) -> int:
        return len(self.frame)

    def line_of(self, position: int) -> int:
        """File line number of the record at `position` (0-based row)."""
        return self.line_numbers[position]

    def records(self) -> list[Record]:
        """Rows as plain dicts in file order, absent values as None."""
        return [
            {k: (None if pd.isna(v) else str(v)) for k, v in row.items()}
            for row in self.frame.to_dict(orient="records")
        ]


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_json(obj: Any, path: Path) -> None:
    ensure_parent_dir(path)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


def load_validation_config(path: Path | None) -> ValidationConfig:
    """Load rule-set parameters from YAML; keys not in the file keep their defaults."""
    if path is None:
        return DEFAULT_CONFIG
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    return ValidationConfig.model_validate(data)


def _unique_names(header: list[str]) -> list[str]:
    """Mangle repeated header names (`a`, `a.1`, ...) so the frame keeps every field."""
    seen: dict[str, int] = {}
    out = []
    for name in header:
        n = seen.get(name, 0)
        out.append(name if n == 0 else f"{name}.{n}")
        seen[name] = n + 1
    return out


def dataset_from_rows(
    header: list[str],
    rows: list[list[str]],
    *,
    schema: TableSchema | None = None,
    line_numbers: list[int] | None = None,
    source: str = "<memory>",
) -> StationDataset:
    """Build a `StationDataset` from already split fields.

    Short rows are padded with absent values and long rows are truncated to
    the header width; the original widths survive in `field_counts`. Without
    `line_numbers`, rows are taken to follow the header line by line.
    """
    if schema is None:
        schema = stations_schema()

    width = len(header)
    field_counts = tuple(len(r) for r in rows)
    if line_numbers is None:
        line_numbers = list(range(2, len(rows) + 2))
    if len(line_numbers) != len(rows):
        raise ValueError(f"{len(line_numbers)} line numbers for {len(rows)} rows")
    padded = [(list(r) + [""] * (width - len(r)))[:width] for r in rows]

    df = pd.DataFrame(padded, columns=_unique_names(header), dtype="string")
    df = conform_df(df, schema).reset_index(drop=True)
    return StationDataset(
        header=tuple(header),
        frame=df,
        field_counts=field_counts,
        line_numbers=tuple(line_numbers),
        source=source,
    )


def read_stations_csv(
    path: Path,
    *,
    schema: TableSchema | None = None,
    delimiter: str = DELIMITER,
    encoding: str = ENCODING,
) -> StationDataset:
    """Read a stations file.

    The raw field count of each line is kept (the arity rule needs it), so
    lines are split with the csv module and then handed to pandas.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing stations file: {path}")

    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ValueError(f"{path}: not valid {encoding}: {exc}") from exc

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    lines = []
    line_numbers = []
    for row in reader:
        if row:
            lines.append(row)
            line_numbers.append(reader.line_num)
    if not lines:
        raise ValueError(f"{path}: file is empty (no header row)")

    header, rows = lines[0], lines[1:]
    header[0] = header[0].lstrip("\ufeff")
    dataset = dataset_from_rows(
        header, rows, schema=schema, line_numbers=line_numbers[1:], source=str(path)
    )
    LOGGER.info("Loaded %d stations (%d columns) from %s", len(dataset), len(header), path)
    return dataset
