from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_admin(row: dict) -> Admin:
        return Admin(id=int(row["id"]), username=row["username"], password_hash=row["password_hash"])

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, password_hash FROM admins WHERE id=%s", (int(admin_id),))
            row = fetchone(cur)
            return self._to_admin(row) if row else None

    def get_by_username(self, username: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, password_hash FROM admins WHERE username=%s", (username,))
            row = fetchone(cur)
            return self._to_admin(row) if row else None

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM admins")
            return int(fetchone(cur)["count"])

    def create_first(self, *, username: str, password_hash: str) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            # FOR UPDATE takes the gap lock so two concurrent setups cannot both see zero rows.
            cur.execute("SELECT COUNT(*) AS count FROM admins FOR UPDATE")
            if int(fetchone(cur)["count"]) > 0:
                return None
            cur.execute(
                "INSERT INTO admins(username, password_hash) VALUES(%s,%s)",
                (username, password_hash),
            )
            return int(cur.lastrowid)
