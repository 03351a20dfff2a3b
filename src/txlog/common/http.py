"""Helpers shared by the JSON controllers."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..admins.model import SessionIdentity
from ..core.constants import GENERIC_ERROR_MESSAGE
from ..core.exceptions import DomainError, StorageError, Unauthorized

logger = logging.getLogger(__name__)


def ok(message: Optional[str] = None, *, data: Any = None, status: int = 200, **extra):
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status


def error_response(exc: DomainError):
    message = GENERIC_ERROR_MESSAGE if isinstance(exc, StorageError) else str(exc)
    return jsonify({"success": False, "message": message}), exc.status_code


def payload() -> dict:
    """Request fields from a JSON body, falling back to form data."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def current_identity() -> Optional[SessionIdentity]:
    admin_id = session.get("admin_id")
    if admin_id is None:
        return None
    return SessionIdentity(admin_id=int(admin_id), username=session.get("admin_username", ""))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_identity() is None:
            return error_response(Unauthorized())
        return view(*args, **kwargs)

    return wrapper
