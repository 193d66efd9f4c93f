"""Test configuration and fixtures."""

from datetime import date
from uuid import uuid4

import logfire
import pytest

from booknet.domain.model import Role, User
from booknet.domain.value import RoleId, RoleName, UserId


@pytest.fixture(scope="session", autouse=True)
def configure_test_logfire():
    """Keep telemetry local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_role(name: str) -> Role:
    """Helper function to build a role with a fresh ID."""
    return Role(id=RoleId(uuid4()), name=RoleName(name))


def make_user(
    email: str = "ada@example.com",
    *,
    roles: list[Role] | None = None,
    enabled: bool = True,
    account_locked: bool = False,
    firstname: str = "Ada",
    lastname: str = "Lovelace",
    password: str = "hashed-secret",
) -> User:
    """Helper function to build a user for tests.

    Defaults to an active account with no roles.
    """
    return User(
        id=UserId(uuid4()),
        firstname=firstname,
        lastname=lastname,
        date_of_birth=date(1815, 12, 10),
        email=email,
        password=password,
        enabled=enabled,
        account_locked=account_locked,
        roles=tuple(roles or ()),
    )
