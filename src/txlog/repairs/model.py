from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class RepairIntake:
    office_name: str
    brought_by_name: str
    product_name: str
    received_by_name: str
    receive_date: date
    quantity: int = 1
    brought_by_role: Optional[str] = None
    received_by_role: Optional[str] = None
    serial_number: Optional[str] = None
    model_number: Optional[str] = None
    problem_description: Optional[str] = None
    contact_number: Optional[str] = None


@dataclass(frozen=True)
class RepairWork:
    repair_person_name: str
    repair_date: date
    repair_status: str
    repair_person_role: Optional[str] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class RepairRelease:
    released_to_name: str
    released_by_name: str
    release_date: date
