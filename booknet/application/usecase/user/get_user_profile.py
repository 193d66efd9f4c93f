"""Get user profile use case."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from booknet.application.usecase.base import BaseUseCase
from booknet.domain.service import UserService
from booknet.domain.value import AccountStatus, UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class GetUserProfileResponse(BaseModel):
    """User profile with derived authorization data."""

    user_id: str
    firstname: str
    lastname: str
    full_name: str
    email: str
    date_of_birth: date | None
    account_status: AccountStatus
    authorities: list[str]
    owned_book_ids: list[str]
    history_ids: list[str]
    created_at: datetime
    updated_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for reading a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Load a profile together with owned books and history references.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        book_ids = await self.user_service.get_owned_book_ids(user.id)
        history_ids = await self.user_service.get_history_ids(user.id)

        return GetUserProfileResponse(
            user_id=str(user.id),
            firstname=user.firstname,
            lastname=user.lastname,
            full_name=user.full_name,
            email=user.email,
            date_of_birth=user.date_of_birth,
            account_status=user.account_status,
            authorities=list(user.authorities()),
            owned_book_ids=[str(book_id) for book_id in book_ids],
            history_ids=[str(history_id) for history_id in history_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
