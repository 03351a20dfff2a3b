from __future__ import annotations

from flask import Flask

from ..common.http import current_identity, error_response, login_required, ok, payload
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reservations", methods=["GET"], endpoint="list_reservations")
    @login_required
    def list_reservations():
        try:
            return ok(data=container.reservation_service.list_reservations())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reservations", methods=["POST"], endpoint="create_reservation")
    @login_required
    def create_reservation():
        try:
            reservation_id = container.reservation_service.reserve(payload())
            return ok("Reservation created.", id=reservation_id)
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reservations/<int:reservation_id>/pick", methods=["PUT"], endpoint="pick_reservation")
    @login_required
    def pick_reservation(reservation_id: int):
        try:
            container.reservation_service.pick(reservation_id, payload())
            return ok("Item picked up.")
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reservations/<int:reservation_id>/return", methods=["PUT"], endpoint="return_reservation")
    @login_required
    def return_reservation(reservation_id: int):
        try:
            container.reservation_service.return_item(reservation_id, payload())
            return ok("Item returned.")
        except DomainError as e:
            return error_response(e)

    @app.route("/api/reservations/<int:reservation_id>", methods=["DELETE"], endpoint="delete_reservation")
    @login_required
    def delete_reservation(reservation_id: int):
        try:
            container.reservation_service.delete(
                identity=current_identity(),
                admin_password=payload().get("adminPassword"),
                reservation_id=reservation_id,
            )
            return ok("Record deleted.")
        except DomainError as e:
            return error_response(e)
