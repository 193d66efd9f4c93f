"""Persistence infrastructure providers."""

from uuid import uuid4

from dishka import Scope, provide
import logfire

from booknet.config import AuthSettings
from booknet.domain.model import Role
from booknet.domain.repository import (
    BookRepository,
    RoleRepository,
    TransactionHistoryRepository,
    UserRepository,
)
from booknet.domain.value import RoleId, RoleName
from booknet.persistence.repository import (
    InMemoryBookRepository,
    InMemoryRoleRepository,
    InMemoryTransactionHistoryRepository,
    InMemoryUserRepository,
)
from booknet.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    An adapter for the external store subclasses this and provides the
    four repository interfaces.
    """

    pass


class InMemoryPersistenceProvider(PersistenceProvider):
    """Persistence provider backed by in-memory repositories.

    Repositories are APP-scoped so every request sees the same store.
    """

    scope = Scope.APP

    @provide
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide
    def get_role_repository(self, auth_settings: AuthSettings) -> RoleRepository:
        """Provide in-memory role repository seeded with the default roles."""
        roles = [
            Role(id=RoleId(uuid4()), name=RoleName(name))
            for name in dict.fromkeys(auth_settings.default_role_names)
        ]
        logfire.info("Default roles seeded", role_names=[r.name.root for r in roles])
        return InMemoryRoleRepository(roles)

    @provide
    def get_book_repository(self) -> BookRepository:
        """Provide in-memory book lookup."""
        return InMemoryBookRepository()

    @provide
    def get_history_repository(self) -> TransactionHistoryRepository:
        """Provide in-memory transaction history lookup."""
        return InMemoryTransactionHistoryRepository()
