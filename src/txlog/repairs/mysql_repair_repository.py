from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_date, format_datetime
from ..core.enums import PersonRole, RepairStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lock_status
from ..registry import sql as registry
from ..workflow.transitions import RELEASE, REPAIR
from .model import RepairIntake, RepairRelease, RepairWork
from .repository import RepairRepository


class MySQLRepairRepository(RepairRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, intake: RepairIntake) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            office_id = registry.upsert_office(cur, intake.office_name)
            brought_by_id = registry.create_person(cur, intake.brought_by_name, intake.brought_by_role)
            product_id = registry.create_product(
                cur, intake.product_name, intake.serial_number, intake.model_number
            )
            received_by_id = registry.create_person(cur, intake.received_by_name, intake.received_by_role)

            cur.execute(
                """
                INSERT INTO repair_transactions(
                    office_id, brought_by_id, product_id, quantity, problem_description,
                    received_by_id, contact_number, receive_date, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    office_id,
                    brought_by_id,
                    product_id,
                    int(intake.quantity),
                    intake.problem_description,
                    received_by_id,
                    intake.contact_number,
                    intake.receive_date,
                    RepairStatus.RECEIVED.value,
                ),
            )
            return int(cur.lastrowid)

    def record_repair(self, repair_id: int, work: RepairWork) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            REPAIR.check(repair_id, lock_status(cur, table="repair_transactions", record_id=repair_id))

            repair_person_id = registry.create_person(cur, work.repair_person_name, work.repair_person_role)
            cur.execute(
                """
                INSERT INTO repair_details(
                    repair_transaction_id, repair_person_id, repair_date, repair_status, comment
                )
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    repair_person_id=VALUES(repair_person_id),
                    repair_date=VALUES(repair_date),
                    repair_status=VALUES(repair_status),
                    comment=VALUES(comment)
                """,
                (int(repair_id), repair_person_id, work.repair_date, work.repair_status, work.comment),
            )
            cur.execute(
                "UPDATE repair_transactions SET status=%s WHERE id=%s",
                (REPAIR.target, int(repair_id)),
            )

    def record_release(self, repair_id: int, release: RepairRelease) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            RELEASE.check(repair_id, lock_status(cur, table="repair_transactions", record_id=repair_id))

            released_to_id = registry.create_person(
                cur, release.released_to_name, PersonRole.OFFICE_REPRESENTATIVE.value
            )
            released_by_id = registry.create_person(cur, release.released_by_name, PersonRole.EMPLOYEE.value)
            cur.execute(
                """
                INSERT INTO release_details(
                    repair_transaction_id, released_to_id, released_by_id, release_date
                )
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    released_to_id=VALUES(released_to_id),
                    released_by_id=VALUES(released_by_id),
                    release_date=VALUES(release_date)
                """,
                (int(repair_id), released_to_id, released_by_id, release.release_date),
            )
            cur.execute(
                "UPDATE repair_transactions SET status=%s WHERE id=%s",
                (RELEASE.target, int(repair_id)),
            )

    def delete(self, repair_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM release_details WHERE repair_transaction_id=%s", (int(repair_id),))
            cur.execute("DELETE FROM repair_details WHERE repair_transaction_id=%s", (int(repair_id),))
            cur.execute("DELETE FROM repair_transactions WHERE id=%s", (int(repair_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    rt.id, rt.quantity, rt.problem_description, rt.contact_number,
                    rt.receive_date, rt.status, rt.created_at,
                    o.office_name,
                    pb.full_name AS brought_by_name, pb.role AS brought_by_role,
                    p.product_name, p.serial_number, p.model_number,
                    rb.full_name AS received_by_name, rb.role AS received_by_role,
                    rd.repair_date, rd.repair_status, rd.comment,
                    rp.full_name AS repair_person_name, rp.role AS repair_person_role,
                    rel.release_date,
                    rlt.full_name AS released_to_name,
                    rlb.full_name AS released_by_name
                FROM repair_transactions rt
                JOIN offices o ON rt.office_id = o.id
                JOIN persons pb ON rt.brought_by_id = pb.id
                JOIN products p ON rt.product_id = p.id
                JOIN persons rb ON rt.received_by_id = rb.id
                LEFT JOIN repair_details rd ON rt.id = rd.repair_transaction_id
                LEFT JOIN persons rp ON rd.repair_person_id = rp.id
                LEFT JOIN release_details rel ON rt.id = rel.repair_transaction_id
                LEFT JOIN persons rlt ON rel.released_to_id = rlt.id
                LEFT JOIN persons rlb ON rel.released_by_id = rlb.id
                ORDER BY rt.created_at DESC, rt.id DESC
                """
            )
            out: list[dict] = []
            for r in fetchall(cur):
                row = dict(r)
                row["receive_date"] = format_date(r.get("receive_date"))
                row["repair_date"] = format_date(r.get("repair_date"))
                row["release_date"] = format_date(r.get("release_date"))
                row["created_at"] = format_datetime(r.get("created_at"))
                out.append(row)
            return out
