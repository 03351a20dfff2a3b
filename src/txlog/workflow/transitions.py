"""Status transition table shared by the four record kinds.

Every kind moves forward along a fixed line of statuses. A transition is
accepted from its source status, or from its target status when it may be
re-applied (the detail row is then updated in place).
"""
from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import BorrowStatus, RepairStatus, ReservationStatus, SessionStatus
from ..core.exceptions import InvalidStateError, NotFoundError


@dataclass(frozen=True)
class Transition:
    kind: str
    name: str
    source: str
    target: str
    reapplicable: bool = True

    def allows(self, current: str) -> bool:
        if current == self.source:
            return True
        return self.reapplicable and current == self.target

    def check(self, record_id: int, current: str | None) -> None:
        """Raise unless ``current`` (None when the row is missing) accepts this transition."""
        if current is None:
            raise NotFoundError(f"{self.kind.capitalize()} #{record_id} not found.")
        if not self.allows(current):
            raise InvalidStateError(
                f"Cannot {self.name} {self.kind} #{record_id}: status is {current}, expected {self.source}."
            )


REPAIR = Transition("repair", "repair", RepairStatus.RECEIVED.value, RepairStatus.REPAIRED.value)
RELEASE = Transition("repair", "release", RepairStatus.REPAIRED.value, RepairStatus.RELEASED.value)

BORROW_RETURN = Transition("borrow", "return", BorrowStatus.BORROWED.value, BorrowStatus.RETURNED.value)

RESERVATION_PICK = Transition(
    "reservation", "pick", ReservationStatus.RESERVED.value, ReservationStatus.PICKED.value
)
RESERVATION_RETURN = Transition(
    "reservation", "return", ReservationStatus.PICKED.value, ReservationStatus.RETURNED.value
)

SESSION_END = Transition(
    "session", "end", SessionStatus.ACTIVE.value, SessionStatus.ENDED.value, reapplicable=False
)

INITIAL_STATUS = {
    "repair": RepairStatus.RECEIVED.value,
    "borrow": BorrowStatus.BORROWED.value,
    "reservation": ReservationStatus.RESERVED.value,
    "session": SessionStatus.ACTIVE.value,
}

TRANSITIONS: dict[tuple[str, str], Transition] = {
    (t.kind, t.name): t
    for t in (REPAIR, RELEASE, BORROW_RETURN, RESERVATION_PICK, RESERVATION_RETURN, SESSION_END)
}
