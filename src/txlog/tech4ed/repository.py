from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Tech4edSession


class Tech4edRepository(Protocol):
    def create(self, *, user_name: str, gender: str, purpose: str, time_in: datetime) -> int:
        raise NotImplementedError

    def end(self, session_id: int, *, time_out: datetime) -> Tech4edSession:
        """Close an Active session; raises NotFoundError / InvalidStateError."""

        raise NotImplementedError

    def delete(self, session_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Tech4edSession]:
        raise NotImplementedError
