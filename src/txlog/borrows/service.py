from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..admins.model import SessionIdentity
from ..admins.service import AuthService
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, parse_quantity, require_fields
from ..core.exceptions import NotFoundError
from .model import BorrowIntake, BorrowReturn
from .repository import BorrowRepository

logger = logging.getLogger(__name__)

INTAKE_FIELDS = ("borrower_name", "released_by_name", "borrow_date", "item_name")
RETURN_FIELDS = ("received_by_name", "return_date")


class BorrowService:
    def __init__(self, borrows: BorrowRepository, gate: AuthService):
        self._borrows = borrows
        self._gate = gate

    def list_borrows(self):
        return self._borrows.list_all()

    def lend(self, data: Mapping[str, Any]) -> int:
        require_fields(data, INTAKE_FIELDS)
        intake = BorrowIntake(
            borrower_name=str(data["borrower_name"]).strip(),
            released_by_name=str(data["released_by_name"]).strip(),
            item_name=str(data["item_name"]).strip(),
            borrow_date=parse_iso_date(data["borrow_date"], "borrow_date"),
            quantity=parse_quantity(data.get("quantity")),
            borrow_office=optional_text(data.get("borrow_office")),
        )
        borrow_id = self._borrows.create(intake)
        logger.info("Borrow #%s: %s x%s to %s", borrow_id, intake.item_name, intake.quantity, intake.borrower_name)
        return borrow_id

    def return_item(self, borrow_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, RETURN_FIELDS)
        returned = BorrowReturn(
            received_by_name=str(data["received_by_name"]).strip(),
            return_date=parse_iso_date(data["return_date"], "return_date"),
        )
        self._borrows.record_return(int(borrow_id), returned)
        logger.info("Borrow #%s returned", borrow_id)

    def delete(self, *, identity: Optional[SessionIdentity], admin_password: Optional[str], borrow_id: int) -> None:
        self._gate.verify_step_up(identity, admin_password)
        if not self._borrows.delete(int(borrow_id)):
            raise NotFoundError(f"Borrow #{borrow_id} not found.")
        logger.info("Borrow #%s deleted by admin #%s", borrow_id, identity.admin_id)
