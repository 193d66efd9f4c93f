"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from booknet.domain.model.user import User
from booknet.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (login identifier).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether any user already uses this email.

        Args:
            email: Email address to check

        Returns:
            True if the email is taken
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Implementations stamp ``updated_at``, keep the ``created_at`` of an
        existing record and enforce email uniqueness.

        Args:
            user: The user to save

        Returns:
            The saved user as stored

        Raises:
            DuplicateEmailError: If another user already has this email
        """
        pass
