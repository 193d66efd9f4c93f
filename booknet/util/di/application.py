"""Application layer DI providers."""

from dishka import Scope, provide

from booknet.application.usecase.auth import AuthenticateUseCase
from booknet.application.usecase.user import (
    AssignRolesUseCase,
    ChangeAccountStatusUseCase,
    GetUserProfileUseCase,
    RegisterUserUseCase,
    UpdateUserProfileUseCase,
)
from booknet.config import Settings
from booknet.domain.service import AuthService, UserService
from booknet.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_authenticate_use_case(
        self, auth_service: AuthService
    ) -> AuthenticateUseCase:
        """Provide authenticate use case."""
        return AuthenticateUseCase(auth_service=auth_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, user_service: UserService, settings: Settings
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(user_service=user_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_change_account_status_use_case(
        self, user_service: UserService
    ) -> ChangeAccountStatusUseCase:
        """Provide change account status use case."""
        return ChangeAccountStatusUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_assign_roles_use_case(
        self, user_service: UserService
    ) -> AssignRolesUseCase:
        """Provide assign roles use case."""
        return AssignRolesUseCase(user_service=user_service)
