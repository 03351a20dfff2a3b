from __future__ import annotations

from datetime import date

import pytest

from txlog.core.exceptions import InvalidStateError, NotFoundError, Unauthorized, ValidationError
from txlog.reservations.service import INTAKE_FIELDS, PICK_FIELDS, RETURN_FIELDS, ReservationService
from txlog.workflow.transitions import RESERVATION_PICK, RESERVATION_RETURN


class InMemoryReservations:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, dict] = {}
        self.offices: dict[str, int] = {}
        self.writes = 0

    def create(self, intake):
        self.writes += 1
        self.offices.setdefault(intake.office_name, len(self.offices) + 1)
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = {
            "intake": intake,
            "office_id": self.offices[intake.office_name],
            "status": "Reserved",
            "actual_pickup_date": None,
            "actual_return_date": None,
        }
        return rid

    def _check(self, transition, rid):
        row = self.rows.get(rid)
        transition.check(rid, row["status"] if row else None)
        return row

    def record_pickup(self, reservation_id, pickup):
        row = self._check(RESERVATION_PICK, reservation_id)
        self.writes += 1
        row.update(status=RESERVATION_PICK.target, actual_pickup_date=pickup.actual_pickup_date)

    def record_return(self, reservation_id, returned):
        row = self._check(RESERVATION_RETURN, reservation_id)
        self.writes += 1
        row.update(status=RESERVATION_RETURN.target, actual_return_date=returned.actual_return_date)

    def delete(self, reservation_id):
        return self.rows.pop(reservation_id, None) is not None

    def list_all(self):
        return []


INTAKE = {
    "reserver_name": "R. Dizon",
    "office_name": "Planning Office",
    "item_name": "Laptop",
    "reservation_date": "2024-05-02",
    "estimated_pickup_date": "2024-05-06",
    "estimated_return_date": "2024-05-08",
    "purpose": "Seminar",
}
PICK = {"released_by_name": "A. Reyes", "actual_pickup_date": "2024-05-06"}
RETURN = {"received_by_name": "A. Reyes", "actual_return_date": "2024-05-08"}


@pytest.fixture
def repo():
    return InMemoryReservations()


@pytest.fixture
def svc(repo, gate):
    return ReservationService(repo, gate)


def test_reserve_pick_return(svc, repo):
    rid = svc.reserve(INTAKE)
    assert repo.rows[rid]["status"] == "Reserved"
    assert repo.rows[rid]["actual_pickup_date"] is None

    svc.pick(rid, PICK)
    assert repo.rows[rid]["status"] == "Picked"
    assert repo.rows[rid]["actual_pickup_date"] == date(2024, 5, 6)

    svc.return_item(rid, RETURN)
    assert repo.rows[rid]["status"] == "Returned"
    assert repo.rows[rid]["actual_return_date"] == date(2024, 5, 8)


def test_same_office_name_shares_one_office(svc, repo):
    a = svc.reserve(INTAKE)
    b = svc.reserve(INTAKE)
    assert repo.rows[a]["office_id"] == repo.rows[b]["office_id"]
    assert len(repo.offices) == 1


@pytest.mark.parametrize("missing", INTAKE_FIELDS)
def test_reserve_missing_field_writes_nothing(svc, repo, missing):
    with pytest.raises(ValidationError):
        svc.reserve({k: v for k, v in INTAKE.items() if k != missing})
    assert repo.writes == 0


@pytest.mark.parametrize("fields,method", [(PICK_FIELDS, "pick"), (RETURN_FIELDS, "return_item")])
def test_transition_missing_fields_write_nothing(svc, repo, fields, method):
    rid = svc.reserve(INTAKE)
    with pytest.raises(ValidationError):
        getattr(svc, method)(rid, {fields[0]: "x"})
    assert repo.writes == 1


def test_return_before_pick_is_invalid_state(svc):
    rid = svc.reserve(INTAKE)
    with pytest.raises(InvalidStateError):
        svc.return_item(rid, RETURN)


def test_pick_after_return_is_invalid_state(svc):
    rid = svc.reserve(INTAKE)
    svc.pick(rid, PICK)
    svc.return_item(rid, RETURN)
    with pytest.raises(InvalidStateError):
        svc.pick(rid, PICK)


def test_return_before_pickup_window_is_rejected(svc):
    with pytest.raises(ValidationError):
        svc.reserve(dict(INTAKE, estimated_return_date="2024-05-01"))


def test_pick_unknown_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.pick(77, PICK)


def test_delete_without_session_is_rejected(svc, repo, admin_password):
    rid = svc.reserve(INTAKE)
    with pytest.raises(Unauthorized):
        svc.delete(identity=None, admin_password=admin_password, reservation_id=rid)
    assert rid in repo.rows
