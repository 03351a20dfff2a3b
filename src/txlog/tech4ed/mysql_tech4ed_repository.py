from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import SessionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..workflow.transitions import SESSION_END
from .model import Tech4edSession
from .repository import Tech4edRepository

_COLUMNS = "id, user_name, gender, purpose, time_in, time_out, status, created_at"


def _to_session(r: dict) -> Tech4edSession:
    return Tech4edSession(
        id=int(r["id"]),
        user_name=r["user_name"],
        gender=r["gender"],
        purpose=r["purpose"],
        time_in=r["time_in"],
        time_out=r.get("time_out"),
        status=SessionStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLTech4edRepository(Tech4edRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_name: str, gender: str, purpose: str, time_in: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tech4ed_sessions(user_name, gender, purpose, time_in, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user_name, gender, purpose, time_in, SessionStatus.ACTIVE.value),
            )
            return int(cur.lastrowid)

    def end(self, session_id: int, *, time_out: datetime) -> Tech4edSession:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM tech4ed_sessions WHERE id=%s FOR UPDATE",
                (int(session_id),),
            )
            r = fetchone(cur)
            SESSION_END.check(session_id, r["status"] if r else None)

            cur.execute(
                "UPDATE tech4ed_sessions SET time_out=%s, status=%s WHERE id=%s",
                (time_out, SESSION_END.target, int(session_id)),
            )
            current = _to_session(r)
            return Tech4edSession(
                id=current.id,
                user_name=current.user_name,
                gender=current.gender,
                purpose=current.purpose,
                time_in=current.time_in,
                time_out=time_out,
                status=SessionStatus.ENDED,
                created_at=current.created_at,
            )

    def delete(self, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tech4ed_sessions WHERE id=%s", (int(session_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Tech4edSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM tech4ed_sessions ORDER BY time_in DESC, id DESC")
            return [_to_session(r) for r in fetchall(cur)]
