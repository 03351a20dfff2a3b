from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import error_response, ok, payload
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = payload()
        try:
            identity = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except DomainError as e:
            return error_response(e)

        session.clear()
        session.permanent = True
        session["admin_id"] = identity.admin_id
        session["admin_username"] = identity.username
        return ok("Login successful.")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/api/me", methods=["GET"], endpoint="me")
    def me():
        if "admin_id" not in session:
            return jsonify({"loggedIn": False})
        return jsonify({"loggedIn": True, "username": session.get("admin_username")})

    @app.route("/api/setup", methods=["POST"], endpoint="setup")
    def setup():
        data = payload()
        try:
            container.auth_service.setup_admin(data.get("username", ""), data.get("password", ""))
        except DomainError as e:
            return error_response(e)
        return ok("Admin created.")
