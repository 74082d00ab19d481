"""Text helpers (slug derivation)."""

from __future__ import annotations

from station_qa.text.slug import normalize

__all__ = ["normalize"]
