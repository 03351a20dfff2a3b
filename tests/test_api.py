from __future__ import annotations

import logging

import pytest

from txlog.borrows.service import BorrowService
from txlog.container import Container
from txlog.main import create_app
from txlog.registry.model import Office
from txlog.registry.service import RegistryService
from txlog.repairs.service import RepairService
from txlog.reports.service import ReportService
from txlog.reservations.service import ReservationService
from txlog.tech4ed.service import Tech4edService


class Repairs:
    def __init__(self):
        self.rows: dict[int, dict] = {}

    def create(self, intake):
        rid = len(self.rows) + 1
        self.rows[rid] = {"id": rid, "office_name": intake.office_name, "status": "Received"}
        return rid

    def delete(self, repair_id):
        return self.rows.pop(repair_id, None) is not None

    def list_all(self):
        return list(self.rows.values())


class Empty:
    def list_all(self):
        return []


class Registry:
    def list_offices(self):
        return [Office(id=1, office_name="Accounting")]


class Reports:
    def status_counts(self):
        return {"repair": {"Received": 1}}

    def monthly_repair_outcomes(self, *, since):
        return []

    def top_offices(self, *, limit):
        return [{"office_name": "Accounting", "total": 1}]


@pytest.fixture
def repairs():
    return Repairs()


@pytest.fixture
def client(monkeypatch, gate, repairs):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(
        auth_service=gate,
        registry_service=RegistryService(Registry()),
        repair_service=RepairService(repairs, gate),
        borrow_service=BorrowService(Empty(), gate),
        reservation_service=ReservationService(Empty(), gate),
        tech4ed_service=Tech4edService(Empty(), gate),
        report_service=ReportService(Reports()),
    )
    return create_app(container=container).test_client()


@pytest.fixture
def logged_in(client, admin_password):
    res = client.post("/login", json={"username": "admin", "password": admin_password})
    assert res.status_code == 200
    return client


REPAIR = {
    "office_name": "Accounting",
    "brought_by_name": "J. Tan",
    "product_name": "Printer",
    "received_by_name": "A. Reyes",
    "receive_date": "2024-03-01",
}


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/api/repairs"),
        ("post", "/api/borrows"),
        ("get", "/api/reservations"),
        ("put", "/api/tech4ed/1/end"),
        ("get", "/api/stats/summary"),
        ("get", "/api/offices"),
    ],
)
def test_anonymous_requests_are_rejected(client, method, path):
    res = getattr(client, method)(path)
    assert res.status_code == 401
    assert res.get_json() == {"success": False, "message": "Unauthorized. Please login."}


def test_me_reflects_session(client, admin_password):
    assert client.get("/api/me").get_json() == {"loggedIn": False}
    client.post("/login", json={"username": "admin", "password": admin_password})
    assert client.get("/api/me").get_json() == {"loggedIn": True, "username": "admin"}
    client.post("/logout")
    assert client.get("/api/me").get_json() == {"loggedIn": False}


def test_bad_login_is_401(client):
    res = client.post("/login", json={"username": "admin", "password": "nope"})
    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid credentials."


def test_setup_after_bootstrap_is_rejected(client):
    res = client.post("/api/setup", json={"username": "x", "password": "y"})
    assert res.status_code == 400
    assert res.get_json()["message"] == "Admin already exists."


def test_create_repair_returns_id(logged_in, repairs):
    res = logged_in.post("/api/repairs", json=REPAIR)
    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["id"] in repairs.rows


def test_create_repair_with_missing_field(logged_in, repairs):
    res = logged_in.post("/api/repairs", json=dict(REPAIR, product_name=""))
    assert res.status_code == 400
    assert "product_name" in res.get_json()["message"]
    assert repairs.rows == {}


def test_delete_requires_admin_password(logged_in, repairs):
    rid = logged_in.post("/api/repairs", json=REPAIR).get_json()["id"]

    assert logged_in.delete(f"/api/repairs/{rid}", json={}).status_code == 400
    assert logged_in.delete(f"/api/repairs/{rid}", json={"adminPassword": "wrong"}).status_code == 403
    assert rid in repairs.rows


def test_delete_with_admin_password(logged_in, repairs, admin_password):
    rid = logged_in.post("/api/repairs", json=REPAIR).get_json()["id"]

    res = logged_in.delete(f"/api/repairs/{rid}", json={"adminPassword": admin_password})
    assert res.status_code == 200
    assert repairs.rows == {}
    assert logged_in.delete(f"/api/repairs/{rid}", json={"adminPassword": admin_password}).status_code == 404


def test_stats_and_offices(logged_in):
    summary = logged_in.get("/api/stats/summary").get_json()["data"]
    assert summary["repair"]["pending"] == 1

    monthly = logged_in.get("/api/stats/monthly").get_json()["data"]
    assert len(monthly) == 6

    offices = logged_in.get("/api/offices").get_json()["data"]
    assert offices == [{"id": 1, "office_name": "Accounting"}]


def test_unknown_route_is_json_404(client):
    res = client.get("/nope")
    assert res.status_code == 404
    assert res.get_json()["success"] is False


def test_numeric_password_is_rejected_as_bad_credentials(client):
    res = client.post("/login", json={"username": "admin", "password": 123})
    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid credentials."


def test_package_log_level_follows_settings(client):
    assert logging.getLogger("txlog").level == logging.WARNING
