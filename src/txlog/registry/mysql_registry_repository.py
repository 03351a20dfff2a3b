from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from . import sql
from .model import Office
from .repository import RegistryRepository


class MySQLRegistryRepository(RegistryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_office(self, office_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return sql.upsert_office(cur, office_name)

    def create_person(self, full_name: str, role: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return sql.create_person(cur, full_name, role)

    def create_product(
        self,
        product_name: str,
        serial_number: Optional[str] = None,
        model_number: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return sql.create_product(cur, product_name, serial_number, model_number)

    def list_offices(self) -> Sequence[Office]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, office_name FROM offices ORDER BY office_name")
            return [Office(id=int(r["id"]), office_name=r["office_name"]) for r in fetchall(cur)]
