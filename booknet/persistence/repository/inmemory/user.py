"""In-memory user repository."""

from typing import Optional

from booknet.domain.error import DuplicateEmailError
from booknet.domain.model.common import utcnow
from booknet.domain.model.user import User
from booknet.domain.repository.user import UserRepository
from booknet.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    Mirrors what the external store guarantees: unique emails, a
    ``created_at`` that never changes once stored and an ``updated_at``
    stamped on every save.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user already uses this email."""
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        owner = await self.find_by_email(user.email)
        if owner and owner.id != user.id:
            raise DuplicateEmailError(user.email)

        existing = self._users.get(user.id)
        created_at = existing.created_at if existing else user.created_at
        stored = user.model_copy(
            update={
                "created_at": created_at,
                "updated_at": max(utcnow(), created_at),
            }
        )
        self._users[user.id] = stored
        return stored
