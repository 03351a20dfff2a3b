from __future__ import annotations

from flask import Flask

from ..common.http import current_identity, error_response, login_required, ok, payload
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/repairs", methods=["GET"], endpoint="list_repairs")
    @login_required
    def list_repairs():
        try:
            return ok(data=container.repair_service.list_repairs())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/repairs", methods=["POST"], endpoint="create_repair")
    @login_required
    def create_repair():
        try:
            repair_id = container.repair_service.receive(payload())
            return ok("Repair transaction created.", id=repair_id)
        except DomainError as e:
            return error_response(e)

    @app.route("/api/repairs/<int:repair_id>/repair", methods=["PUT"], endpoint="repair_repair")
    @login_required
    def repair_repair(repair_id: int):
        try:
            container.repair_service.repair(repair_id, payload())
            return ok("Repair details saved.")
        except DomainError as e:
            return error_response(e)

    @app.route("/api/repairs/<int:repair_id>/release", methods=["PUT"], endpoint="release_repair")
    @login_required
    def release_repair(repair_id: int):
        try:
            container.repair_service.release(repair_id, payload())
            return ok("Item released.")
        except DomainError as e:
            return error_response(e)

    @app.route("/api/repairs/<int:repair_id>", methods=["DELETE"], endpoint="delete_repair")
    @login_required
    def delete_repair(repair_id: int):
        try:
            container.repair_service.delete(
                identity=current_identity(),
                admin_password=payload().get("adminPassword"),
                repair_id=repair_id,
            )
            return ok("Record deleted.")
        except DomainError as e:
            return error_response(e)
