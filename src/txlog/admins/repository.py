from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def create_first(self, *, username: str, password_hash: str) -> Optional[int]:
        """Insert the admin only while none exists. Returns None when one already does."""

        raise NotImplementedError
