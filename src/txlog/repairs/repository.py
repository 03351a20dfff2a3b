from __future__ import annotations

from typing import Protocol, Sequence

from .model import RepairIntake, RepairRelease, RepairWork


class RepairRepository(Protocol):
    def create(self, intake: RepairIntake) -> int:
        """Insert registry rows and the transaction in one unit; returns the new id."""

        raise NotImplementedError

    def record_repair(self, repair_id: int, work: RepairWork) -> None:
        """Upsert repair_details and move the transaction to Repaired."""

        raise NotImplementedError

    def record_release(self, repair_id: int, release: RepairRelease) -> None:
        """Upsert release_details and move the transaction to Released."""

        raise NotImplementedError

    def delete(self, repair_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        """Return UI rows (joined with registry and detail tables)."""

        raise NotImplementedError
