"""Slug derivation for station display names."""

from __future__ import annotations

import re

from slugify import slugify

# "/" and "." separate words in station names ("Figueras/Figueres", "Esp.").
_SEPARATORS = re.compile(r"[/.]")


def normalize(text: str) -> str:
    """Map a display name to its URL-safe slug.

    `normalize("Figueras/Figueres Vilafant Esp.") == "figueras-figueres-vilafant-esp"`.
    Idempotent on its own output.
    """
    return slugify(_SEPARATORS.sub("-", text))
