from __future__ import annotations

from datetime import date
from typing import Mapping, Sequence

from ..core.enums import RepairOutcome
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import ReportRepository

_KIND_TABLES = {
    "repair": "repair_transactions",
    "borrow": "borrow_transactions",
    "reservation": "reservations",
    "session": "tech4ed_sessions",
}


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def status_counts(self) -> Mapping[str, Mapping[str, int]]:
        out: dict[str, dict[str, int]] = {}
        with db_cursor(self._conn_factory) as (_, cur):
            for kind, table in _KIND_TABLES.items():
                cur.execute(f"SELECT status, COUNT(*) AS total FROM {table} GROUP BY status")
                out[kind] = {r["status"]: int(r["total"]) for r in fetchall(cur)}
        return out

    def monthly_repair_outcomes(self, *, since: date) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    YEAR(rt.receive_date) AS y,
                    MONTH(rt.receive_date) AS m,
                    COUNT(*) AS total,
                    COALESCE(SUM(rd.repair_status = %s), 0) AS fixed,
                    COALESCE(SUM(rd.repair_status = %s), 0) AS unserviceable
                FROM repair_transactions rt
                LEFT JOIN repair_details rd ON rt.id = rd.repair_transaction_id
                WHERE rt.receive_date >= %s
                GROUP BY y, m
                ORDER BY y, m
                """,
                (RepairOutcome.FIXED.value, RepairOutcome.UNSERVICEABLE.value, since),
            )
            return [
                {
                    "month": f"{int(r['y']):04d}-{int(r['m']):02d}",
                    "total": int(r["total"] or 0),
                    "fixed": int(r["fixed"] or 0),
                    "unserviceable": int(r["unserviceable"] or 0),
                }
                for r in fetchall(cur)
            ]

    def top_offices(self, *, limit: int) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT o.office_name, COUNT(rt.id) AS total
                FROM repair_transactions rt
                JOIN offices o ON rt.office_id = o.id
                GROUP BY o.id, o.office_name
                ORDER BY total DESC, o.office_name ASC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [{"office_name": r["office_name"], "total": int(r["total"])} for r in fetchall(cur)]
