from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_date, format_datetime
from ..core.enums import BorrowStatus, PersonRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lock_status
from ..registry import sql as registry
from ..workflow.transitions import BORROW_RETURN
from .model import BorrowIntake, BorrowReturn
from .repository import BorrowRepository


class MySQLBorrowRepository(BorrowRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, intake: BorrowIntake) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            borrower_id = registry.create_person(cur, intake.borrower_name, PersonRole.BORROWER.value)
            released_by_id = registry.create_person(cur, intake.released_by_name, PersonRole.EMPLOYEE.value)
            cur.execute(
                """
                INSERT INTO borrow_transactions(
                    borrower_id, released_by_id, item_name, quantity, borrow_date, borrow_office, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    borrower_id,
                    released_by_id,
                    intake.item_name,
                    int(intake.quantity),
                    intake.borrow_date,
                    intake.borrow_office,
                    BorrowStatus.BORROWED.value,
                ),
            )
            return int(cur.lastrowid)

    def record_return(self, borrow_id: int, returned: BorrowReturn) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            BORROW_RETURN.check(borrow_id, lock_status(cur, table="borrow_transactions", record_id=borrow_id))

            received_by_id = registry.create_person(cur, returned.received_by_name, PersonRole.EMPLOYEE.value)
            cur.execute(
                """
                INSERT INTO return_details(borrow_transaction_id, received_by_id, return_date)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    received_by_id=VALUES(received_by_id),
                    return_date=VALUES(return_date)
                """,
                (int(borrow_id), received_by_id, returned.return_date),
            )
            cur.execute(
                "UPDATE borrow_transactions SET status=%s WHERE id=%s",
                (BORROW_RETURN.target, int(borrow_id)),
            )

    def delete(self, borrow_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM return_details WHERE borrow_transaction_id=%s", (int(borrow_id),))
            cur.execute("DELETE FROM borrow_transactions WHERE id=%s", (int(borrow_id),))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    bt.id, bt.item_name, bt.quantity, bt.borrow_date, bt.borrow_office,
                    bt.status, bt.created_at,
                    b.full_name AS borrower_name,
                    rb.full_name AS released_by_name,
                    rd.return_date,
                    rcv.full_name AS received_by_name
                FROM borrow_transactions bt
                JOIN persons b ON bt.borrower_id = b.id
                JOIN persons rb ON bt.released_by_id = rb.id
                LEFT JOIN return_details rd ON bt.id = rd.borrow_transaction_id
                LEFT JOIN persons rcv ON rd.received_by_id = rcv.id
                ORDER BY bt.created_at DESC, bt.id DESC
                """
            )
            out: list[dict] = []
            for r in fetchall(cur):
                row = dict(r)
                row["borrow_date"] = format_date(r.get("borrow_date"))
                row["return_date"] = format_date(r.get("return_date"))
                row["created_at"] = format_datetime(r.get("created_at"))
                out.append(row)
            return out
