"""Unit tests for RegisterUserUseCase."""

from datetime import date
from uuid import UUID

import pytest

from booknet.application.usecase.user import RegisterUserUseCase
from booknet.application.usecase.user.register_user import RegisterUserRequest
from booknet.config import AuthSettings, Settings
from booknet.domain.error import DuplicateEmailError, NotFoundError
from booknet.domain.repository import UserRepository
from booknet.domain.service import UserService
from booknet.domain.value import AccountStatus, UserId
from booknet.persistence.repository.inmemory import (
    InMemoryBookRepository,
    InMemoryRoleRepository,
    InMemoryTransactionHistoryRepository,
    InMemoryUserRepository,
)
from tests.harness import create_env_fixture

# Unit test fixtures
unit_env = create_env_fixture()
open_env = create_env_fixture(
    Settings(environment="test", auth=AuthSettings(enable_on_registration=True))
)


def _request(email: str = "reader@example.com") -> RegisterUserRequest:
    return RegisterUserRequest(
        firstname="Ada",
        lastname="Lovelace",
        email=email,
        password="$2a$10$hashed",
        date_of_birth=date(1815, 12, 10),
    )


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_creates_disabled_user_with_default_role(self, unit_env):
        """New accounts are unlocked, not yet enabled and hold the USER role."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(_request())

        # Assert
        assert response.email == "reader@example.com"
        assert response.full_name == "Ada Lovelace"
        assert response.account_status == AccountStatus.DISABLED
        assert response.authorities == ["USER"]

        saved = await user_repo.find_by_id(UserId(UUID(response.user_id)))
        assert saved is not None
        assert saved.account_locked is False
        assert saved.enabled is False
        assert saved.credential_secret() == "$2a$10$hashed"
        assert saved.date_of_birth == date(1815, 12, 10)
        assert saved.created_at <= saved.updated_at

    @pytest.mark.asyncio
    async def test_register_enabled_when_configured(self, open_env):
        use_case = await open_env.get(RegisterUserUseCase)

        response = await use_case.execute(_request())

        assert response.account_status == AccountStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(_request())

        with pytest.raises(DuplicateEmailError):
            await use_case.execute(_request())

    @pytest.mark.asyncio
    async def test_register_assigns_fresh_ids(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)

        first = await use_case.execute(_request("one@example.com"))
        second = await use_case.execute(_request("two@example.com"))

        assert first.user_id != second.user_id

    @pytest.mark.asyncio
    async def test_register_fails_when_default_role_missing(self):
        """Should refuse to register when a default role cannot be resolved."""
        user_repo = InMemoryUserRepository()
        user_service = UserService(
            user_repo,
            InMemoryRoleRepository(),
            InMemoryBookRepository(),
            InMemoryTransactionHistoryRepository(),
        )
        use_case = RegisterUserUseCase(user_service, Settings(environment="test"))

        with pytest.raises(NotFoundError):
            await use_case.execute(_request())

        assert await user_repo.exists_by_email("reader@example.com") is False
