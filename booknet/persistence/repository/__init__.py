"""Repository implementations."""

from .inmemory import (
    InMemoryBookRepository,
    InMemoryRoleRepository,
    InMemoryTransactionHistoryRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryBookRepository",
    "InMemoryRoleRepository",
    "InMemoryTransactionHistoryRepository",
    "InMemoryUserRepository",
]
