"""Unit tests for AssignRolesUseCase."""

import pytest

from booknet.application.usecase.user import AssignRolesUseCase
from booknet.application.usecase.user.assign_roles import AssignRolesRequest
from booknet.config import AuthSettings, Settings
from booknet.domain.error import NotFoundError, ValidationError
from booknet.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture with an extra role known to the role store
unit_env = create_env_fixture(
    Settings(
        environment="test",
        auth=AuthSettings(default_role_names=["USER", "ADMIN"]),
    )
)


class TestAssignRolesUseCase:
    """Tests for AssignRolesUseCase."""

    @pytest.mark.asyncio
    async def test_assign_roles_in_request_order(self, unit_env):
        """Authorities follow the order the roles were requested in."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(AssignRolesUseCase)
        user = await user_repo.save(make_user())

        # Act
        response = await use_case.execute(
            AssignRolesRequest(user_id=str(user.id), role_names=["ADMIN", "USER"])
        )

        # Assert
        assert response.authorities == ["ADMIN", "USER"]
        stored = await user_repo.find_by_id(user.id)
        assert stored.authorities() == ("ADMIN", "USER")

    @pytest.mark.asyncio
    async def test_repeated_names_granted_once(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(AssignRolesUseCase)
        user = await user_repo.save(make_user())

        response = await use_case.execute(
            AssignRolesRequest(user_id=str(user.id), role_names=["USER", "USER"])
        )

        assert response.authorities == ["USER"]

    @pytest.mark.asyncio
    async def test_unknown_role(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(AssignRolesUseCase)
        user = await user_repo.save(make_user())

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AssignRolesRequest(user_id=str(user.id), role_names=["LIBRARIAN"])
            )

        stored = await user_repo.find_by_id(user.id)
        assert stored.authorities() == ()

    @pytest.mark.asyncio
    async def test_blank_role_name(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(AssignRolesUseCase)
        user = await user_repo.save(make_user())

        with pytest.raises(ValidationError):
            await use_case.execute(
                AssignRolesRequest(user_id=str(user.id), role_names=["USER", " "])
            )

        stored = await user_repo.find_by_id(user.id)
        assert stored.authorities() == ()
