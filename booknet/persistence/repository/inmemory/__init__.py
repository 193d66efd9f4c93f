"""In-memory repository implementations."""

from .book import InMemoryBookRepository, InMemoryTransactionHistoryRepository
from .role import InMemoryRoleRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryBookRepository",
    "InMemoryRoleRepository",
    "InMemoryTransactionHistoryRepository",
    "InMemoryUserRepository",
]
