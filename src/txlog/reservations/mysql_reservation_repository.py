from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_date, format_datetime
from ..core.enums import PersonRole, ReservationStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lock_status
from ..registry import sql as registry
from ..workflow.transitions import RESERVATION_PICK, RESERVATION_RETURN
from .model import ReservationIntake, ReservationPickup, ReservationReturn
from .repository import ReservationRepository

_DATE_COLUMNS = (
    "reservation_date",
    "estimated_pickup_date",
    "estimated_return_date",
    "actual_pickup_date",
    "actual_return_date",
)


class MySQLReservationRepository(ReservationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, intake: ReservationIntake) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            reserver_id = registry.create_person(cur, intake.reserver_name, PersonRole.RESERVER.value)
            office_id = registry.upsert_office(cur, intake.office_name)
            approved_by_id = None
            if intake.approved_by_name:
                approved_by_id = registry.create_person(cur, intake.approved_by_name, PersonRole.EMPLOYEE.value)

            cur.execute(
                """
                INSERT INTO reservations(
                    reserver_id, office_id, item_name, quantity, purpose, notes,
                    reservation_date, estimated_pickup_date, estimated_return_date,
                    approved_by_id, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    reserver_id,
                    office_id,
                    intake.item_name,
                    int(intake.quantity),
                    intake.purpose,
                    intake.notes,
                    intake.reservation_date,
                    intake.estimated_pickup_date,
                    intake.estimated_return_date,
                    approved_by_id,
                    ReservationStatus.RESERVED.value,
                ),
            )
            return int(cur.lastrowid)

    def record_pickup(self, reservation_id: int, pickup: ReservationPickup) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            RESERVATION_PICK.check(
                reservation_id, lock_status(cur, table="reservations", record_id=reservation_id)
            )
            released_by_id = registry.create_person(cur, pickup.released_by_name, PersonRole.EMPLOYEE.value)
            cur.execute(
                """
                UPDATE reservations
                SET actual_pickup_date=%s, released_by_id=%s, status=%s
                WHERE id=%s
                """,
                (pickup.actual_pickup_date, released_by_id, RESERVATION_PICK.target, int(reservation_id)),
            )

    def record_return(self, reservation_id: int, returned: ReservationReturn) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            RESERVATION_RETURN.check(
                reservation_id, lock_status(cur, table="reservations", record_id=reservation_id)
            )
            received_by_id = registry.create_person(cur, returned.received_by_name, PersonRole.EMPLOYEE.value)
            cur.execute(
                """
                UPDATE reservations
                SET actual_return_date=%s, received_by_id=%s, status=%s
                WHERE id=%s
                """,
                (returned.actual_return_date, received_by_id, RESERVATION_RETURN.target, int(reservation_id)),
            )

    def delete(self, reservation_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM reservations WHERE id=%s", (int(reservation_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    r.id, r.item_name, r.quantity, r.purpose, r.notes,
                    r.reservation_date, r.estimated_pickup_date, r.estimated_return_date,
                    r.actual_pickup_date, r.actual_return_date,
                    r.status, r.created_at,
                    o.office_name,
                    rs.full_name AS reserver_name,
                    ap.full_name AS approved_by_name,
                    rb.full_name AS released_by_name,
                    rc.full_name AS received_by_name
                FROM reservations r
                JOIN persons rs ON r.reserver_id = rs.id
                JOIN offices o ON r.office_id = o.id
                LEFT JOIN persons ap ON r.approved_by_id = ap.id
                LEFT JOIN persons rb ON r.released_by_id = rb.id
                LEFT JOIN persons rc ON r.received_by_id = rc.id
                ORDER BY r.created_at DESC, r.id DESC
                """
            )
            out: list[dict] = []
            for r in fetchall(cur):
                row = dict(r)
                for col in _DATE_COLUMNS:
                    row[col] = format_date(r.get(col))
                row["created_at"] = format_datetime(r.get("created_at"))
                out.append(row)
            return out
