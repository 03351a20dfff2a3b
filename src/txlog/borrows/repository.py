from __future__ import annotations

from typing import Protocol, Sequence

from .model import BorrowIntake, BorrowReturn


class BorrowRepository(Protocol):
    def create(self, intake: BorrowIntake) -> int:
        raise NotImplementedError

    def record_return(self, borrow_id: int, returned: BorrowReturn) -> None:
        raise NotImplementedError

    def delete(self, borrow_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError
