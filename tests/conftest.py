from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from txlog.admins.model import Admin, SessionIdentity
from txlog.admins.service import AuthService

ADMIN_PASSWORD = "s3cret-pass"


class InMemoryAdmins:
    def __init__(self, admins: Optional[list[Admin]] = None):
        self._by_id = {a.id: a for a in (admins or [])}

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        return self._by_id.get(admin_id)

    def get_by_username(self, username: str) -> Optional[Admin]:
        return next((a for a in self._by_id.values() if a.username == username), None)

    def count(self) -> int:
        return len(self._by_id)

    def create_first(self, *, username: str, password_hash: str) -> Optional[int]:
        if self._by_id:
            return None
        admin = Admin(id=1, username=username, password_hash=password_hash)
        self._by_id[admin.id] = admin
        return admin.id

    def remove(self, admin_id: int) -> None:
        self._by_id.pop(admin_id, None)


class FakeCursor:
    """Records statements; ``responses`` maps a SQL fragment to the rows it returns."""

    def __init__(self):
        self.executed: list[tuple[str, object]] = []
        self.responses: dict[str, list] = {}
        self.fail_on: Optional[str] = None
        self.lastrowid = 0
        self.rowcount = 0
        self.closed = False
        self._rows: list = []
        self._next_id = 100

    def execute(self, sql, params=None):
        stmt = " ".join(sql.split())
        self.executed.append((stmt, params))
        if self.fail_on and self.fail_on in stmt:
            import mysql.connector

            raise mysql.connector.Error(msg=f"forced failure on {self.fail_on}")

        self._rows = []
        for fragment, rows in self.responses.items():
            if fragment in stmt:
                self._rows = list(rows)
                break

        if stmt.upper().startswith("INSERT"):
            self._next_id += 1
            self.lastrowid = self._next_id
        self.rowcount = 1

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        self.closed = True

    def statements(self) -> list[str]:
        return [s for s, _ in self.executed]


class FakeConnection:
    def __init__(self):
        self.cur = FakeCursor()
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self):
        self.conn = FakeConnection()

    def connect(self):
        return self.conn


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 15, 9, 30, 0)


@pytest.fixture
def admin() -> Admin:
    return Admin(id=1, username="admin", password_hash=generate_password_hash(ADMIN_PASSWORD))


@pytest.fixture
def admins_repo(admin) -> InMemoryAdmins:
    return InMemoryAdmins([admin])


@pytest.fixture
def gate(admins_repo) -> AuthService:
    return AuthService(admins_repo)


@pytest.fixture
def identity(admin) -> SessionIdentity:
    return SessionIdentity(admin_id=admin.id, username=admin.username)


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def fake_db() -> FakeConnectionFactory:
    return FakeConnectionFactory()
