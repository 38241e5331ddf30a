"""Domain value type for mobile phone records."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Mobile:
    """A phone record. Equality and hashing cover both fields."""

    imei: str
    model: str
