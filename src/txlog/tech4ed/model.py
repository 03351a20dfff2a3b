from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import SessionStatus


@dataclass(frozen=True)
class Tech4edSession:
    """A walk-in use of the Tech4Ed center's computers."""

    id: int
    user_name: str
    gender: str
    purpose: str
    time_in: datetime
    time_out: Optional[datetime]
    status: SessionStatus
    created_at: Optional[datetime] = None

    def duration_seconds(self, now: datetime) -> int:
        end = self.time_out or now
        return max(0, int((end - self.time_in).total_seconds()))
