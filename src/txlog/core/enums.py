from __future__ import annotations

from enum import Enum


class RepairStatus(str, Enum):
    """Lifecycle of an item brought in for repair."""

    RECEIVED = "Received"
    REPAIRED = "Repaired"
    RELEASED = "Released"


class RepairOutcome(str, Enum):
    """Known values of repair_details.repair_status used by the reports."""

    FIXED = "Fixed"
    UNSERVICEABLE = "Unserviceable"


class BorrowStatus(str, Enum):
    BORROWED = "Borrowed"
    RETURNED = "Returned"


class ReservationStatus(str, Enum):
    RESERVED = "Reserved"
    PICKED = "Picked"
    RETURNED = "Returned"
    CANCELLED = "Cancelled"


class SessionStatus(str, Enum):
    """Tech4Ed walk-in session state."""

    ACTIVE = "Active"
    ENDED = "Ended"


class PersonRole(str, Enum):
    EMPLOYEE = "Employee"
    BORROWER = "Borrower"
    OFFICE_REPRESENTATIVE = "Office Representative"
    RESERVER = "Reserver"
