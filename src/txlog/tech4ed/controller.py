from __future__ import annotations

from flask import Flask

from ..common.http import current_identity, error_response, login_required, ok, payload
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tech4ed", methods=["GET"], endpoint="list_tech4ed")
    @login_required
    def list_tech4ed():
        try:
            return ok(data=container.tech4ed_service.list_sessions())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/tech4ed", methods=["POST"], endpoint="start_tech4ed")
    @login_required
    def start_tech4ed():
        try:
            session_id = container.tech4ed_service.start(payload())
            return ok("Session started.", id=session_id)
        except DomainError as e:
            return error_response(e)

    @app.route("/api/tech4ed/<int:session_id>/end", methods=["PUT"], endpoint="end_tech4ed")
    @login_required
    def end_tech4ed(session_id: int):
        try:
            return ok("Session ended.", data=container.tech4ed_service.end(session_id))
        except DomainError as e:
            return error_response(e)

    @app.route("/api/tech4ed/<int:session_id>", methods=["DELETE"], endpoint="delete_tech4ed")
    @login_required
    def delete_tech4ed(session_id: int):
        try:
            container.tech4ed_service.delete(
                identity=current_identity(),
                admin_password=payload().get("adminPassword"),
                session_id=session_id,
            )
            return ok("Record deleted.")
        except DomainError as e:
            return error_response(e)
