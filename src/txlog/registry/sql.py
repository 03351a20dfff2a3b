"""Registry writes that run on the caller's cursor.

Workflow repositories call these inside their own unit so registry rows and
the transaction row commit or roll back together.
"""
from __future__ import annotations

from typing import Optional

from ..core.enums import PersonRole
from ..database.mysql_base import fetchone


def upsert_office(cur, office_name: str) -> int:
    # LAST_INSERT_ID(id) makes lastrowid report the existing row on a duplicate name.
    cur.execute(
        """
        INSERT INTO offices(office_name) VALUES(%s)
        ON DUPLICATE KEY UPDATE id=LAST_INSERT_ID(id)
        """,
        (office_name,),
    )
    if cur.lastrowid:
        return int(cur.lastrowid)
    cur.execute("SELECT id FROM offices WHERE office_name=%s", (office_name,))
    return int(fetchone(cur)["id"])


def create_person(cur, full_name: str, role: Optional[str] = None) -> int:
    cur.execute(
        "INSERT INTO persons(full_name, role) VALUES(%s,%s)",
        (full_name, role or PersonRole.EMPLOYEE.value),
    )
    return int(cur.lastrowid)


def create_product(
    cur,
    product_name: str,
    serial_number: Optional[str] = None,
    model_number: Optional[str] = None,
) -> int:
    cur.execute(
        "INSERT INTO products(product_name, serial_number, model_number) VALUES(%s,%s,%s)",
        (product_name, serial_number or None, model_number or None),
    )
    return int(cur.lastrowid)
