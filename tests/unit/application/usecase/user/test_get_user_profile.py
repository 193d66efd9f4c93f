"""Unit tests for GetUserProfileUseCase."""

from uuid import uuid4

import pytest

from booknet.application.usecase.user import GetUserProfileUseCase
from booknet.application.usecase.user.get_user_profile import GetUserProfileRequest
from booknet.domain.error import NotFoundError
from booknet.domain.repository import (
    BookRepository,
    TransactionHistoryRepository,
    UserRepository,
)
from booknet.domain.value import AccountStatus, BookId, TransactionHistoryId
from tests.conftest import make_role, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    """Tests for GetUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_includes_derived_data(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        book_repo = await unit_env.get(BookRepository)
        history_repo = await unit_env.get(TransactionHistoryRepository)
        use_case = await unit_env.get(GetUserProfileUseCase)
        user = await user_repo.save(
            make_user(
                roles=[make_role("ADMIN"), make_role("USER")], account_locked=True
            )
        )
        book_id = BookId(uuid4())
        history_id = TransactionHistoryId(uuid4())
        book_repo.add(user.id, book_id)
        history_repo.add(user.id, history_id)

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id=str(user.id)))

        # Assert
        assert response.full_name == "Ada Lovelace"
        assert response.email == user.email
        assert response.account_status == AccountStatus.LOCKED
        assert response.authorities == ["ADMIN", "USER"]
        assert response.owned_book_ids == [str(book_id)]
        assert response.history_ids == [str(history_id)]
        assert response.created_at == user.created_at

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=str(uuid4())))
