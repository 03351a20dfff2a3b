from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.constants import GENERIC_ERROR_MESSAGE
from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One atomic unit: commit when the block exits, roll back on any error.

    Driver errors are logged and re-raised as ``StorageError``; domain errors
    raised inside the block propagate unchanged after the rollback.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.exception("Could not obtain a database connection")
        raise StorageError(GENERIC_ERROR_MESSAGE) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        _safe_rollback(conn)
        logger.exception("Database operation failed, unit rolled back")
        raise StorageError(GENERIC_ERROR_MESSAGE) from exc
    except Exception:
        _safe_rollback(conn)
        raise
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        logger.warning("Rollback failed; connection will be discarded", exc_info=True)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def lock_status(cur, *, table: str, record_id: int) -> Optional[str]:
    """Lock one workflow row for the rest of the unit and return its status."""
    cur.execute(f"SELECT status FROM {table} WHERE id=%s FOR UPDATE", (int(record_id),))
    row = fetchone(cur)
    return row["status"] if row else None
