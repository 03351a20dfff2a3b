from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..admins.model import SessionIdentity
from ..admins.service import AuthService
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, parse_quantity, require_fields
from ..core.exceptions import NotFoundError
from .model import RepairIntake, RepairRelease, RepairWork
from .repository import RepairRepository

logger = logging.getLogger(__name__)

INTAKE_FIELDS = ("office_name", "brought_by_name", "product_name", "received_by_name", "receive_date")
REPAIR_FIELDS = ("repair_person_name", "repair_date", "repair_status")
RELEASE_FIELDS = ("released_to_name", "released_by_name", "release_date")


class RepairService:
    """Use cases: receive an item, record the repair, release it back to the office."""

    def __init__(self, repairs: RepairRepository, gate: AuthService):
        self._repairs = repairs
        self._gate = gate

    def list_repairs(self):
        return self._repairs.list_all()

    def receive(self, data: Mapping[str, Any]) -> int:
        require_fields(data, INTAKE_FIELDS)
        intake = RepairIntake(
            office_name=str(data["office_name"]).strip(),
            brought_by_name=str(data["brought_by_name"]).strip(),
            product_name=str(data["product_name"]).strip(),
            received_by_name=str(data["received_by_name"]).strip(),
            receive_date=parse_iso_date(data["receive_date"], "receive_date"),
            quantity=parse_quantity(data.get("quantity")),
            brought_by_role=optional_text(data.get("brought_by_role")),
            received_by_role=optional_text(data.get("received_by_role")),
            serial_number=optional_text(data.get("serial_number")),
            model_number=optional_text(data.get("model_number")),
            problem_description=optional_text(data.get("problem_description")),
            contact_number=optional_text(data.get("contact_number")),
        )
        repair_id = self._repairs.create(intake)
        logger.info("Repair #%s received from %s", repair_id, intake.office_name)
        return repair_id

    def repair(self, repair_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, REPAIR_FIELDS)
        work = RepairWork(
            repair_person_name=str(data["repair_person_name"]).strip(),
            repair_date=parse_iso_date(data["repair_date"], "repair_date"),
            repair_status=str(data["repair_status"]).strip(),
            repair_person_role=optional_text(data.get("repair_person_role")),
            comment=optional_text(data.get("comment")),
        )
        self._repairs.record_repair(int(repair_id), work)
        logger.info("Repair #%s marked repaired (%s)", repair_id, work.repair_status)

    def release(self, repair_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, RELEASE_FIELDS)
        release = RepairRelease(
            released_to_name=str(data["released_to_name"]).strip(),
            released_by_name=str(data["released_by_name"]).strip(),
            release_date=parse_iso_date(data["release_date"], "release_date"),
        )
        self._repairs.record_release(int(repair_id), release)
        logger.info("Repair #%s released", repair_id)

    def delete(self, *, identity: Optional[SessionIdentity], admin_password: Optional[str], repair_id: int) -> None:
        self._gate.verify_step_up(identity, admin_password)
        if not self._repairs.delete(int(repair_id)):
            raise NotFoundError(f"Repair #{repair_id} not found.")
        logger.info("Repair #%s deleted by admin #%s", repair_id, identity.admin_id)
