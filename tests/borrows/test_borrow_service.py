from __future__ import annotations

import pytest

from txlog.borrows.service import BorrowService, INTAKE_FIELDS, RETURN_FIELDS
from txlog.core.exceptions import IncorrectPassword, NotFoundError, ValidationError
from txlog.workflow.transitions import BORROW_RETURN


class InMemoryBorrows:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, dict] = {}
        self.return_details: dict[int, dict] = {}
        self.writes = 0

    def create(self, intake):
        self.writes += 1
        bid = self._next_id
        self._next_id += 1
        self.rows[bid] = {"intake": intake, "status": "Borrowed"}
        return bid

    def record_return(self, borrow_id, returned):
        row = self.rows.get(borrow_id)
        BORROW_RETURN.check(borrow_id, row["status"] if row else None)
        self.writes += 1
        self.return_details[borrow_id] = {"received_by": returned.received_by_name, "date": returned.return_date}
        row["status"] = BORROW_RETURN.target

    def delete(self, borrow_id):
        self.return_details.pop(borrow_id, None)
        return self.rows.pop(borrow_id, None) is not None

    def list_all(self):
        return []


INTAKE = {
    "borrower_name": "L. Garcia",
    "released_by_name": "A. Reyes",
    "borrow_date": "2024-03-01",
    "item_name": "Projector",
    "quantity": "2",
    "borrow_office": "Accounting",
}


@pytest.fixture
def repo():
    return InMemoryBorrows()


@pytest.fixture
def svc(repo, gate):
    return BorrowService(repo, gate)


def test_lend_starts_borrowed_without_return_detail(svc, repo):
    bid = svc.lend(INTAKE)
    assert repo.rows[bid]["status"] == "Borrowed"
    assert repo.rows[bid]["intake"].quantity == 2
    assert repo.rows[bid]["intake"].borrow_office == "Accounting"
    assert bid not in repo.return_details


def test_borrow_office_is_optional(svc, repo):
    bid = svc.lend({k: v for k, v in INTAKE.items() if k != "borrow_office"})
    assert repo.rows[bid]["intake"].borrow_office is None


@pytest.mark.parametrize("missing", INTAKE_FIELDS)
def test_lend_missing_field_writes_nothing(svc, repo, missing):
    with pytest.raises(ValidationError):
        svc.lend({k: v for k, v in INTAKE.items() if k != missing})
    assert repo.writes == 0


@pytest.mark.parametrize("missing", RETURN_FIELDS)
def test_return_missing_field_writes_nothing(svc, repo, missing):
    bid = svc.lend(INTAKE)
    data = {"received_by_name": "A. Reyes", "return_date": "2024-03-05"}
    data.pop(missing)
    with pytest.raises(ValidationError):
        svc.return_item(bid, data)
    assert repo.writes == 1


def test_return_twice_keeps_one_detail(svc, repo):
    bid = svc.lend(INTAKE)
    svc.return_item(bid, {"received_by_name": "A. Reyes", "return_date": "2024-03-05"})
    svc.return_item(bid, {"received_by_name": "B. Lim", "return_date": "2024-03-06"})

    assert repo.rows[bid]["status"] == "Returned"
    assert list(repo.return_details) == [bid]
    assert repo.return_details[bid]["received_by"] == "B. Lim"


def test_return_unknown_borrow_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.return_item(5, {"received_by_name": "A. Reyes", "return_date": "2024-03-05"})


def test_delete_with_wrong_password_keeps_row(svc, repo, identity):
    bid = svc.lend(INTAKE)
    with pytest.raises(IncorrectPassword):
        svc.delete(identity=identity, admin_password="nope", borrow_id=bid)
    assert bid in repo.rows


def test_delete_with_step_up(svc, repo, identity, admin_password):
    bid = svc.lend(INTAKE)
    svc.delete(identity=identity, admin_password=admin_password, borrow_id=bid)
    assert bid not in repo.rows
