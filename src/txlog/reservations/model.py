from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ReservationIntake:
    reserver_name: str
    office_name: str
    item_name: str
    reservation_date: date
    estimated_pickup_date: date
    estimated_return_date: date
    quantity: int = 1
    purpose: Optional[str] = None
    notes: Optional[str] = None
    approved_by_name: Optional[str] = None


@dataclass(frozen=True)
class ReservationPickup:
    released_by_name: str
    actual_pickup_date: date


@dataclass(frozen=True)
class ReservationReturn:
    received_by_name: str
    actual_return_date: date
