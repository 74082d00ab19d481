"""Project configuration (paths, constants, rule-set parameters)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Input file format
DELIMITER: str = ";"
ENCODING: str = "utf-8"

EXPECTED_COLUMNS: int = 32

# Very rough bounding box of Europe (WGS84), mostly catches swapped lon/lat.
# (min_lon, min_lat, max_lon, max_lat)
EUROPE_BBOX_WGS84: tuple[float, float, float, float] = (-10.0, 35.0, 39.0, 68.0)

LOCALES: tuple[str, ...] = ("fr", "en", "de", "it")

# Exception: CDG TGV uic8_sncf is the one of CDG 2 RER.
UIC8_WHITELIST_IDS: frozenset[str] = frozenset({"1144"})


class CarrierSpec(BaseModel):
    """A carrier column pair (`<name>_id`, `<name>_is_enabled`)."""

    model_config = ConfigDict(frozen=True)

    name: str
    # None means any length
    id_length: int | None = None

    @property
    def id_column(self) -> str:
        return f"{self.name}_id"

    @property
    def enabled_column(self) -> str:
        return f"{self.name}_is_enabled"


CARRIERS: tuple[CarrierSpec, ...] = (
    CarrierSpec(name="db"),
    CarrierSpec(name="idbus", id_length=3),
    CarrierSpec(name="idtgv", id_length=3),
    CarrierSpec(name="ntv", id_length=3),
    CarrierSpec(name="ouigo", id_length=3),
    CarrierSpec(name="sncf", id_length=5),
    CarrierSpec(name="trenitalia", id_length=7),
)


class ValidationConfig(BaseModel):
    """Immutable parameters of the rule catalog.

    Defaults reproduce the published European rule set; override any field
    (directly or through a YAML file) to validate a differently shaped dataset.
    """

    model_config = ConfigDict(frozen=True)

    expected_columns: int = EXPECTED_COLUMNS
    carriers: tuple[CarrierSpec, ...] = CARRIERS
    locales: tuple[str, ...] = LOCALES
    bbox: tuple[float, float, float, float] = EUROPE_BBOX_WGS84
    uic8_whitelist_ids: frozenset[str] = UIC8_WHITELIST_IDS
    # True: the whole field must be two uppercase letters. False: any field
    # containing two consecutive uppercase letters passes.
    country_full_match: bool = True
    uic_duplicates_fatal: bool = False
    meta_station_min_children: int = Field(default=2, ge=1)

    def carrier(self, name: str) -> CarrierSpec:
        for spec in self.carriers:
            if spec.name == name:
                return spec
        raise KeyError(f"unknown carrier {name!r}")


DEFAULT_CONFIG = ValidationConfig()


def project_root() -> Path:
    """Return repository root assuming this file lives in `<root>/station_qa/core/config.py`."""
    return Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Paths:
    root: Path
    config: Path


def get_paths(root: Path | None = None) -> Paths:
    r = project_root() if root is None else Path(root).resolve()
    return Paths(
        root=r,
        config=r / "config" / "validation.yaml",
    )


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
