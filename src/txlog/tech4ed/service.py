from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from ..admins.model import SessionIdentity
from ..admins.service import AuthService
from ..common.datetime_utils import format_datetime, now_local
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError
from .model import Tech4edSession
from .repository import Tech4edRepository

logger = logging.getLogger(__name__)

START_FIELDS = ("user_name", "gender", "purpose")


class Tech4edService:
    """Use cases: log a walk-in user in, log them out, list sessions with durations."""

    def __init__(self, sessions: Tech4edRepository, gate: AuthService):
        self._sessions = sessions
        self._gate = gate

    @staticmethod
    def to_row(s: Tech4edSession, *, now: datetime) -> dict:
        return {
            "id": s.id,
            "user_name": s.user_name,
            "gender": s.gender,
            "purpose": s.purpose,
            "time_in": format_datetime(s.time_in),
            "time_out": format_datetime(s.time_out),
            "status": s.status.value,
            "duration_seconds": s.duration_seconds(now),
        }

    def list_sessions(self, *, now: datetime | None = None) -> list[dict]:
        now = now or now_local()
        return [self.to_row(s, now=now) for s in self._sessions.list_all()]

    def start(self, data: Mapping[str, Any], *, now: datetime | None = None) -> int:
        require_fields(data, START_FIELDS)
        now = now or now_local()
        session_id = self._sessions.create(
            user_name=str(data["user_name"]).strip(),
            gender=str(data["gender"]).strip(),
            purpose=str(data["purpose"]).strip(),
            time_in=now,
        )
        logger.info("Tech4Ed session #%s started", session_id)
        return session_id

    def end(self, session_id: int, *, now: datetime | None = None) -> dict:
        now = now or now_local()
        ended = self._sessions.end(int(session_id), time_out=now)
        logger.info("Tech4Ed session #%s ended after %ss", session_id, ended.duration_seconds(now))
        return self.to_row(ended, now=now)

    def delete(self, *, identity: Optional[SessionIdentity], admin_password: Optional[str], session_id: int) -> None:
        self._gate.verify_step_up(identity, admin_password)
        if not self._sessions.delete(int(session_id)):
            raise NotFoundError(f"Session #{session_id} not found.")
        logger.info("Tech4Ed session #%s deleted by admin #%s", session_id, identity.admin_id)
