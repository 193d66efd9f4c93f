"""In-memory book and transaction history lookups."""

from collections import defaultdict

from booknet.domain.repository.book import BookRepository, TransactionHistoryRepository
from booknet.domain.value import BookId, TransactionHistoryId, UserId


class InMemoryBookRepository(BookRepository):
    """In-memory implementation of BookRepository."""

    def __init__(self) -> None:
        self._owned: dict[UserId, list[BookId]] = defaultdict(list)

    def add(self, owner_id: UserId, book_id: BookId) -> None:
        """Record that a user owns a book."""
        self._owned[owner_id].append(book_id)

    async def find_ids_by_owner(self, owner_id: UserId) -> list[BookId]:
        """List IDs of books owned by a user."""
        return list(self._owned.get(owner_id, []))


class InMemoryTransactionHistoryRepository(TransactionHistoryRepository):
    """In-memory implementation of TransactionHistoryRepository."""

    def __init__(self) -> None:
        self._histories: dict[UserId, list[TransactionHistoryId]] = defaultdict(list)

    def add(self, user_id: UserId, history_id: TransactionHistoryId) -> None:
        """Record a transaction history entry for a user."""
        self._histories[user_id].append(history_id)

    async def find_ids_by_user(self, user_id: UserId) -> list[TransactionHistoryId]:
        """List IDs of transaction history entries for a user."""
        return list(self._histories.get(user_id, []))
