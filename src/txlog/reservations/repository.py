from __future__ import annotations

from typing import Protocol, Sequence

from .model import ReservationIntake, ReservationPickup, ReservationReturn


class ReservationRepository(Protocol):
    def create(self, intake: ReservationIntake) -> int:
        raise NotImplementedError

    def record_pickup(self, reservation_id: int, pickup: ReservationPickup) -> None:
        raise NotImplementedError

    def record_return(self, reservation_id: int, returned: ReservationReturn) -> None:
        raise NotImplementedError

    def delete(self, reservation_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError
