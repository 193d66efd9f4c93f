"""Repository interfaces for the identity domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from booknet.domain.repository.book import BookRepository, TransactionHistoryRepository
from booknet.domain.repository.role import RoleRepository
from booknet.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "RoleRepository",
    "BookRepository",
    "TransactionHistoryRepository",
]
