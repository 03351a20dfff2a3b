from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class BorrowIntake:
    borrower_name: str
    released_by_name: str
    item_name: str
    borrow_date: date
    quantity: int = 1
    borrow_office: Optional[str] = None


@dataclass(frozen=True)
class BorrowReturn:
    received_by_name: str
    return_date: date
