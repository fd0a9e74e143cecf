"""Tests for registration and login."""

import pytest
from pydantic import ValidationError as SchemaError

from ecorevive.domain.enums import Role
from ecorevive.domain.errors import ConflictError, NotFoundError
from ecorevive.domain.schemas import UserCreate
from ecorevive.services.user_service import UserService


@pytest.fixture
def users(store):
    return UserService(store)


def payload(**overrides):
    data = {
        "username": "dana",
        "password": "hunter22",
        "email": "dana@example.com",
        "full_name": "Dana Reyes",
    }
    data.update(overrides)
    return UserCreate(**data)


def test_register_hashes_password(users):
    user = users.register(payload())
    assert user.id == 1
    assert user.role == Role.BUYER
    assert user.password_hash != "hunter22"


@pytest.mark.parametrize(
    "overrides",
    [{"username": "DANA", "email": "other@example.com"}, {"username": "dana2", "email": "Dana@Example.com"}],
)
def test_duplicates_are_conflicts(users, store, overrides):
    users.register(payload())
    with pytest.raises(ConflictError):
        users.register(payload(**overrides))
    assert len(store.users) == 1


def test_authenticate(users):
    users.register(payload())
    assert users.authenticate("Dana", "hunter22").username == "dana"
    with pytest.raises(PermissionError):
        users.authenticate("dana", "wrong-password")
    with pytest.raises(PermissionError):
        users.authenticate("nobody", "hunter22")


def test_get_user(users):
    user = users.register(payload(role=Role.SELLER))
    assert users.get_user(user.id).can_sell
    with pytest.raises(NotFoundError):
        users.get_user(99)


def test_admin_role_cannot_be_registered():
    with pytest.raises(SchemaError):
        payload(role=Role.ADMIN)
