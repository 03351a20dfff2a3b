from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..admins.model import SessionIdentity
from ..admins.service import AuthService
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, parse_quantity, require_fields
from ..core.exceptions import NotFoundError, ValidationError
from .model import ReservationIntake, ReservationPickup, ReservationReturn
from .repository import ReservationRepository

logger = logging.getLogger(__name__)

INTAKE_FIELDS = (
    "reserver_name",
    "office_name",
    "item_name",
    "reservation_date",
    "estimated_pickup_date",
    "estimated_return_date",
)
PICK_FIELDS = ("released_by_name", "actual_pickup_date")
RETURN_FIELDS = ("received_by_name", "actual_return_date")


class ReservationService:
    def __init__(self, reservations: ReservationRepository, gate: AuthService):
        self._reservations = reservations
        self._gate = gate

    def list_reservations(self):
        return self._reservations.list_all()

    def reserve(self, data: Mapping[str, Any]) -> int:
        require_fields(data, INTAKE_FIELDS)
        intake = ReservationIntake(
            reserver_name=str(data["reserver_name"]).strip(),
            office_name=str(data["office_name"]).strip(),
            item_name=str(data["item_name"]).strip(),
            reservation_date=parse_iso_date(data["reservation_date"], "reservation_date"),
            estimated_pickup_date=parse_iso_date(data["estimated_pickup_date"], "estimated_pickup_date"),
            estimated_return_date=parse_iso_date(data["estimated_return_date"], "estimated_return_date"),
            quantity=parse_quantity(data.get("quantity")),
            purpose=optional_text(data.get("purpose")),
            notes=optional_text(data.get("notes")),
            approved_by_name=optional_text(data.get("approved_by_name")),
        )
        if intake.estimated_return_date < intake.estimated_pickup_date:
            raise ValidationError("estimated_return_date must be on or after estimated_pickup_date")

        reservation_id = self._reservations.create(intake)
        logger.info("Reservation #%s: %s for %s", reservation_id, intake.item_name, intake.office_name)
        return reservation_id

    def pick(self, reservation_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, PICK_FIELDS)
        pickup = ReservationPickup(
            released_by_name=str(data["released_by_name"]).strip(),
            actual_pickup_date=parse_iso_date(data["actual_pickup_date"], "actual_pickup_date"),
        )
        self._reservations.record_pickup(int(reservation_id), pickup)
        logger.info("Reservation #%s picked up", reservation_id)

    def return_item(self, reservation_id: int, data: Mapping[str, Any]) -> None:
        require_fields(data, RETURN_FIELDS)
        returned = ReservationReturn(
            received_by_name=str(data["received_by_name"]).strip(),
            actual_return_date=parse_iso_date(data["actual_return_date"], "actual_return_date"),
        )
        self._reservations.record_return(int(reservation_id), returned)
        logger.info("Reservation #%s returned", reservation_id)

    def delete(
        self,
        *,
        identity: Optional[SessionIdentity],
        admin_password: Optional[str],
        reservation_id: int,
    ) -> None:
        self._gate.verify_step_up(identity, admin_password)
        if not self._reservations.delete(int(reservation_id)):
            raise NotFoundError(f"Reservation #{reservation_id} not found.")
        logger.info("Reservation #%s deleted by admin #%s", reservation_id, identity.admin_id)
