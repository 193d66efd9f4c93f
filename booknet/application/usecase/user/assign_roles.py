"""Assign roles use case."""

from uuid import UUID

from pydantic import BaseModel

from booknet.application.usecase.base import BaseUseCase
from booknet.domain.service import UserService
from booknet.domain.value import UserId


class AssignRolesRequest(BaseModel):
    """Replace a user's roles with the named ones, in the given order."""

    user_id: str
    role_names: list[str]


class AssignRolesResponse(BaseModel):
    """Authorities the user holds after the change."""

    user_id: str
    authorities: list[str]


class AssignRolesUseCase(BaseUseCase):
    """Use case for changing which roles a user holds."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize assign roles use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: AssignRolesRequest) -> AssignRolesResponse:
        """Resolve the role names and replace the user's roles.

        Raises:
            NotFoundError: If the user or a role is not found
            ValidationError: If a role name is blank
        """
        user = await self.user_service.assign_roles(
            UserId(UUID(request.user_id)), request.role_names
        )
        return AssignRolesResponse(
            user_id=str(user.id),
            authorities=list(user.authorities()),
        )
