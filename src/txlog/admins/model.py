from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Admin:
    id: int
    username: str
    password_hash: str


@dataclass(frozen=True)
class SessionIdentity:
    """What we store into the Flask session after login."""

    admin_id: int
    username: str
