from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Office:
    """Office names are unique; persons and products get a fresh row per mention."""

    id: int
    office_name: str
