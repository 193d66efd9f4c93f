"""Domain layer DI providers."""

from dishka import Scope, provide

from booknet.domain.repository import (
    BookRepository,
    RoleRepository,
    TransactionHistoryRepository,
    UserRepository,
)
from booknet.domain.service import (
    AccountStatusChecker,
    AuthService,
    CredentialVerifier,
    UserService,
)
from booknet.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with the store's
    transaction boundary.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_account_status_checker(self) -> AccountStatusChecker:
        """Provide the account status gate."""
        return AccountStatusChecker()

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
        status_checker: AccountStatusChecker,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            credential_verifier=credential_verifier,
            status_checker=status_checker,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        book_repository: BookRepository,
        history_repository: TransactionHistoryRepository,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            role_repository=role_repository,
            book_repository=book_repository,
            history_repository=history_repository,
        )
