"""Domain value objects for the book network identity subsystem."""

from booknet.domain.value.identifiers import (
    BookId,
    RoleId,
    TransactionHistoryId,
    UserId,
)
from booknet.domain.value.types import AccountStatus, RoleName, StatusCheck

__all__ = [
    # Identifiers
    "UserId",
    "RoleId",
    "BookId",
    "TransactionHistoryId",
    # Types
    "RoleName",
    "AccountStatus",
    "StatusCheck",
]
