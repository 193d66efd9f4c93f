"""Authenticate use case."""

import logfire
from pydantic import BaseModel, Field

from booknet.application.usecase.base import BaseUseCase
from booknet.domain.service import AuthService


class AuthenticateRequest(BaseModel):
    """Login attempt with email and secret."""

    email: str
    password: str = Field(repr=False)


class AuthenticateResponse(BaseModel):
    """Authenticated principal and the authorities it was granted."""

    user_id: str
    principal_name: str
    full_name: str
    authorities: list[str]


class AuthenticateUseCase(BaseUseCase):
    """Use case for logging a user in with email and secret."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize authenticate use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: AuthenticateRequest) -> AuthenticateResponse:
        """Execute login flow.

        Steps:
        1. Look up the user by email
        2. Check account status (expired, disabled, locked, credentials expired)
        3. Verify the secret
        4. Return the principal with its authorities

        Args:
            request: Login attempt

        Returns:
            Authenticated principal

        Raises:
            AuthenticationError: Subclass naming why the attempt was rejected
        """
        user = await self.auth_service.authenticate(request.email, request.password)

        logfire.info("Login succeeded", user_id=str(user.id))

        return AuthenticateResponse(
            user_id=str(user.id),
            principal_name=user.name(),
            full_name=user.full_name,
            authorities=list(user.authorities()),
        )
