from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

_STATEMENT_END = re.compile(r";[ \t]*$", re.M)
_SKIPPED = re.compile(r"(CREATE\s+DATABASE|USE)\b", re.I)

# (table, column, definition) pairs added to databases created by older releases.
EVOLUTION_COLUMNS: tuple[tuple[str, str, str], ...] = (
    ("borrow_transactions", "borrow_office", "VARCHAR(150) NULL AFTER borrow_date"),
)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "transaction_log_db")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def read_schema_statements(schema_path: str | Path = SCHEMA_PATH) -> list[str]:
    """Statements of the schema file, minus comments and the database selection.

    The target database comes from settings, so the file's own
    ``CREATE DATABASE`` / ``USE`` lines are dropped. Statements end with ``;``
    at the end of a line.
    """
    text = Path(schema_path).read_text(encoding="utf-8")
    lines = [ln for ln in text.splitlines() if ln.strip() and not ln.lstrip().startswith("--")]
    statements = []
    for chunk in _STATEMENT_END.split("\n".join(lines)):
        stmt = chunk.strip()
        if stmt and not _SKIPPED.match(stmt):
            statements.append(stmt)
    return statements


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(db_config)

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        for stmt in read_schema_statements(schema_path):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def column_exists(cur, *, database: str, table: str, column: str) -> bool:
    cur.execute(
        """
        SELECT COUNT(*)
        FROM information_schema.COLUMNS
        WHERE TABLE_SCHEMA=%s AND TABLE_NAME=%s AND COLUMN_NAME=%s
        """,
        (database, table, column),
    )
    return int(cur.fetchone()[0]) > 0


def ensure_columns(db_config: dict, columns: Iterable[tuple[str, str, str]] = EVOLUTION_COLUMNS) -> list[str]:
    """Add any missing evolution columns. Returns the ``table.column`` names added."""
    target = _as_target(db_config)
    added: list[str] = []
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for table, column, definition in columns:
            if column_exists(cur, database=target.database, table=table, column=column):
                continue
            cur.execute(f"ALTER TABLE `{table}` ADD COLUMN `{column}` {definition}")
            added.append(f"{table}.{column}")
        conn.commit()
    finally:
        conn.close()
    return added


def ensure_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Idempotent startup step: create missing tables, then missing columns."""
    apply_schema(db_config, schema_path=schema_path)
    for name in ensure_columns(db_config):
        logger.info("Added column %s", name)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
