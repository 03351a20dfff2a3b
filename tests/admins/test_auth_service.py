from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from txlog.admins.model import Admin, SessionIdentity
from txlog.admins.service import AuthService
from txlog.core.exceptions import (
    AdminNotFound,
    AlreadyInitializedError,
    IncorrectPassword,
    InvalidCredentials,
    Unauthorized,
    ValidationError,
)

from conftest import InMemoryAdmins


def test_authenticate_returns_identity(gate, admin, admin_password):
    identity = gate.authenticate("admin", admin_password)
    assert identity == SessionIdentity(admin_id=admin.id, username="admin")


def test_unknown_user_and_wrong_password_fail_alike(gate, admin_password):
    with pytest.raises(InvalidCredentials) as unknown:
        gate.authenticate("nobody", admin_password)
    with pytest.raises(InvalidCredentials) as wrong:
        gate.authenticate("admin", "wrong")
    assert str(unknown.value) == str(wrong.value)


@pytest.mark.parametrize("username,password", [("", "x"), ("admin", ""), (None, None)])
def test_authenticate_requires_both_fields(gate, username, password):
    with pytest.raises(ValidationError):
        gate.authenticate(username, password)


def test_step_up_accepts_current_password(gate, identity, admin_password):
    gate.verify_step_up(identity, admin_password)


def test_step_up_without_session(gate, admin_password):
    with pytest.raises(Unauthorized):
        gate.verify_step_up(None, admin_password)


def test_step_up_without_password(gate, identity):
    with pytest.raises(ValidationError):
        gate.verify_step_up(identity, "")


def test_step_up_with_wrong_password(gate, identity):
    with pytest.raises(IncorrectPassword):
        gate.verify_step_up(identity, "guess")


def test_step_up_for_deleted_admin(gate, admins_repo, identity, admin_password):
    admins_repo.remove(identity.admin_id)
    with pytest.raises(AdminNotFound):
        gate.verify_step_up(identity, admin_password)


def test_step_up_with_placeholder_hash_is_incorrect():
    gate = AuthService(InMemoryAdmins([Admin(id=3, username="ops", password_hash="CHANGE_ME")]))
    with pytest.raises(IncorrectPassword):
        gate.verify_step_up(SessionIdentity(admin_id=3, username="ops"), "CHANGE_ME")


def test_setup_only_while_empty():
    repo = InMemoryAdmins()
    gate = AuthService(repo)
    assert not gate.is_initialized()

    admin_id = gate.setup_admin("root", "first-pass")
    assert gate.is_initialized()
    assert check_password_hash(repo.get_by_id(admin_id).password_hash, "first-pass")

    with pytest.raises(AlreadyInitializedError):
        gate.setup_admin("other", "second-pass")
    assert repo.count() == 1


def test_setup_requires_fields():
    with pytest.raises(ValidationError):
        AuthService(InMemoryAdmins()).setup_admin("root", "")


@pytest.mark.parametrize("password", [123, ["s3cret-pass"], {"p": 1}])
def test_non_text_password_is_invalid_credentials(gate, password):
    with pytest.raises(InvalidCredentials):
        gate.authenticate("admin", password)


def test_non_text_username_is_invalid_credentials(gate, admin_password):
    with pytest.raises(InvalidCredentials):
        gate.authenticate(["admin"], admin_password)


def test_non_text_step_up_password_is_incorrect(gate, identity):
    with pytest.raises(IncorrectPassword):
        gate.verify_step_up(identity, 12345)


@pytest.mark.parametrize("username,password", [("root", 123), (42, "pass")])
def test_setup_rejects_non_text(username, password):
    repo = InMemoryAdmins()
    with pytest.raises(ValidationError):
        AuthService(repo).setup_admin(username, password)
    assert repo.count() == 0
