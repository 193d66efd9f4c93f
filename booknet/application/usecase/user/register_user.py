"""Register user use case."""

from datetime import date
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from booknet.application.usecase.base import BaseUseCase
from booknet.config import Settings
from booknet.domain.model import User
from booknet.domain.service import UserService
from booknet.domain.value import AccountStatus, UserId


class RegisterUserRequest(BaseModel):
    """Registration request.

    The password arrives already hashed by the credential owner.
    """

    firstname: str
    lastname: str
    email: str
    password: str = Field(repr=False)
    date_of_birth: date | None = None


class RegisterUserResponse(BaseModel):
    """Registration response."""

    user_id: str
    email: str
    full_name: str
    account_status: AccountStatus
    authorities: list[str]


class RegisterUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(self, user_service: UserService, settings: Settings) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            settings: Application settings
        """
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Steps:
        1. Check the email is not taken
        2. Resolve the default roles
        3. Create the user, unlocked and enabled per settings
        4. Save and return the new account

        Args:
            request: Registration request

        Returns:
            The registered account

        Raises:
            DuplicateEmailError: If the email is already registered
            NotFoundError: If a default role does not exist
        """
        with logfire.span("register_user", email=request.email):
            await self.user_service.ensure_email_available(request.email)

            roles = await self.user_service.resolve_roles(
                self.settings.auth.default_role_names
            )

            user = User(
                id=UserId(uuid4()),
                firstname=request.firstname,
                lastname=request.lastname,
                date_of_birth=request.date_of_birth,
                email=request.email,
                password=request.password,
                account_locked=False,
                enabled=self.settings.auth.enable_on_registration,
                roles=roles,
            )
            saved = await self.user_service.save(user)

            logfire.info(
                "New user registered",
                user_id=str(saved.id),
                account_status=saved.account_status.value,
            )

            return RegisterUserResponse(
                user_id=str(saved.id),
                email=saved.email,
                full_name=saved.full_name,
                account_status=saved.account_status,
                authorities=list(saved.authorities()),
            )
