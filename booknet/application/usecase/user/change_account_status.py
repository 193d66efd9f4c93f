"""Change account status use case."""

from uuid import UUID

from pydantic import BaseModel

from booknet.application.usecase.base import BaseUseCase
from booknet.domain.service import UserService
from booknet.domain.value import AccountStatus, UserId


class ChangeAccountStatusRequest(BaseModel):
    """Administrative status change.

    Each flag is optional and changes independently of the other.
    """

    user_id: str
    enabled: bool | None = None
    account_locked: bool | None = None


class ChangeAccountStatusResponse(BaseModel):
    """Account flags and the status they collapse into."""

    user_id: str
    enabled: bool
    account_locked: bool
    account_status: AccountStatus


class ChangeAccountStatusUseCase(BaseUseCase):
    """Use case for enabling, disabling, locking and unlocking accounts.

    Every combination of the two flags is a legal resting state.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize change account status use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: ChangeAccountStatusRequest
    ) -> ChangeAccountStatusResponse:
        """Apply the requested flag changes.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.change_status(
            UserId(UUID(request.user_id)),
            enabled=request.enabled,
            account_locked=request.account_locked,
        )

        return ChangeAccountStatusResponse(
            user_id=str(user.id),
            enabled=user.enabled,
            account_locked=user.account_locked,
            account_status=user.account_status,
        )
