"""Lookup ports for collections owned outside the identity subsystem.

Books and transaction histories belong to the catalog and lending
services. The identity side only needs to know which ones relate to a
user, so these ports return identifiers rather than loading entities.
"""

from abc import ABC, abstractmethod

from booknet.domain.value import BookId, TransactionHistoryId, UserId


class BookRepository(ABC):
    """Lookup of books owned by a user."""

    @abstractmethod
    async def find_ids_by_owner(self, owner_id: UserId) -> list[BookId]:
        """List IDs of books owned by a user.

        Args:
            owner_id: Owning user's ID

        Returns:
            Book IDs, empty if the user owns none
        """
        pass


class TransactionHistoryRepository(ABC):
    """Lookup of borrow/return history entries involving a user."""

    @abstractmethod
    async def find_ids_by_user(self, user_id: UserId) -> list[TransactionHistoryId]:
        """List IDs of transaction history entries for a user.

        Args:
            user_id: User ID

        Returns:
            History entry IDs, empty if there are none
        """
        pass
