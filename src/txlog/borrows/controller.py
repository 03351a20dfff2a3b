from __future__ import annotations

from flask import Flask

from ..common.http import current_identity, error_response, login_required, ok, payload
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/borrows", methods=["GET"], endpoint="list_borrows")
    @login_required
    def list_borrows():
        try:
            return ok(data=container.borrow_service.list_borrows())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/borrows", methods=["POST"], endpoint="create_borrow")
    @login_required
    def create_borrow():
        try:
            borrow_id = container.borrow_service.lend(payload())
            return ok("Borrow transaction created.", id=borrow_id)
        except DomainError as e:
            return error_response(e)

    @app.route("/api/borrows/<int:borrow_id>/return", methods=["PUT"], endpoint="return_borrow")
    @login_required
    def return_borrow(borrow_id: int):
        try:
            container.borrow_service.return_item(borrow_id, payload())
            return ok("Item returned.")
        except DomainError as e:
            return error_response(e)

    @app.route("/api/borrows/<int:borrow_id>", methods=["DELETE"], endpoint="delete_borrow")
    @login_required
    def delete_borrow(borrow_id: int):
        try:
            container.borrow_service.delete(
                identity=current_identity(),
                admin_password=payload().get("adminPassword"),
                borrow_id=borrow_id,
            )
            return ok("Record deleted.")
        except DomainError as e:
            return error_response(e)
