from __future__ import annotations

from flask import Flask

from ..common.http import error_response, login_required, ok
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/stats/summary", methods=["GET"], endpoint="stats_summary")
    @login_required
    def stats_summary():
        try:
            return ok(data=container.report_service.dashboard_summary())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/stats/monthly", methods=["GET"], endpoint="stats_monthly")
    @login_required
    def stats_monthly():
        try:
            return ok(data=container.report_service.monthly_repair_trend())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/stats/offices", methods=["GET"], endpoint="stats_offices")
    @login_required
    def stats_offices():
        try:
            return ok(data=container.report_service.top_offices())
        except DomainError as e:
            return error_response(e)

    @app.route("/api/offices", methods=["GET"], endpoint="list_offices")
    @login_required
    def list_offices():
        try:
            return ok(data=container.registry_service.list_offices())
        except DomainError as e:
            return error_response(e)
