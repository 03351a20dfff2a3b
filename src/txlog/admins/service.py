from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields
from ..core.exceptions import (
    AdminNotFound,
    AlreadyInitializedError,
    IncorrectPassword,
    InvalidCredentials,
    Unauthorized,
    ValidationError,
)
from .model import SessionIdentity
from .repository import AdminRepository

logger = logging.getLogger(__name__)


def _password_matches(password_hash: str, password) -> bool:
    if not isinstance(password, str):
        return False
    try:
        return check_password_hash(password_hash, password)
    except (TypeError, ValueError):
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AuthService:
    """Admin gate: login, step-up re-authentication and first-admin bootstrap."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, username: str, password: str) -> SessionIdentity:
        if not username or not password:
            raise ValidationError("Username and password required.")

        admin = self._admins.get_by_username(username) if isinstance(username, str) else None
        if not admin or not _password_matches(admin.password_hash, password):
            raise InvalidCredentials()

        logger.info("Admin %s logged in", admin.username)
        return SessionIdentity(admin_id=admin.id, username=admin.username)

    def verify_step_up(self, identity: Optional[SessionIdentity], admin_password: Optional[str]) -> None:
        """Re-check the admin password before a destructive operation."""
        if identity is None:
            raise Unauthorized()
        if not admin_password:
            raise ValidationError("Admin password required.")

        admin = self._admins.get_by_id(identity.admin_id)
        if not admin:
            raise AdminNotFound()
        if not _password_matches(admin.password_hash, admin_password):
            logger.warning("Step-up failed for admin #%s", identity.admin_id)
            raise IncorrectPassword()

    def is_initialized(self) -> bool:
        return self._admins.count() > 0

    def setup_admin(self, username: str, password: str) -> int:
        if not isinstance(username, str) or not isinstance(password, str):
            raise ValidationError("Username and password must be text.")
        require_fields({"username": username, "password": password}, ("username", "password"))

        admin_id = self._admins.create_first(
            username=username.strip(),
            password_hash=generate_password_hash(password),
        )
        if admin_id is None:
            raise AlreadyInitializedError()

        logger.info("Bootstrapped admin %s (#%s)", username, admin_id)
        return admin_id
