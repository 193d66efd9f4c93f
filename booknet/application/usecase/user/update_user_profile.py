"""Update user profile use case."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from booknet.application.usecase.base import BaseUseCase
from booknet.domain.service import UserService
from booknet.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    date_of_birth: date | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    firstname: str
    lastname: str
    full_name: str
    email: str
    date_of_birth: date | None
    updated_at: datetime


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating a user's profile.

    Names, email and date of birth can change here. Roles, credentials
    and status flags have their own flows.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Steps:
        1. Get user by ID
        2. Check a changed email is still free
        3. Update the fields that were given (an explicit null clears
           date_of_birth)
        4. Save and return the updated profile

        Args:
            request: Request with user ID and fields to update

        Returns:
            Updated user profile information

        Raises:
            NotFoundError: If user not found
            DuplicateEmailError: If the new email belongs to another user
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        if request.email is not None and request.email != user.email:
            await self.user_service.ensure_email_available(request.email, user.id)

        updates = {
            field: value
            for field, value in request.model_dump(
                exclude={"user_id"}, exclude_unset=True
            ).items()
            if value is not None or field == "date_of_birth"
        }
        saved_user = await self.user_service.save(user.model_copy(update=updates))

        return UpdateUserProfileResponse(
            user_id=str(saved_user.id),
            firstname=saved_user.firstname,
            lastname=saved_user.lastname,
            full_name=saved_user.full_name,
            email=saved_user.email,
            date_of_birth=saved_user.date_of_birth,
            updated_at=saved_user.updated_at,
        )
