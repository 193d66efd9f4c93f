"""Strongly typed identifiers for book network identity entities.

NewType keeps user, role, book and history IDs from being mixed up
while staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
RoleId = NewType("RoleId", UUID)

# Owned by the catalog/lending side; only referenced here
BookId = NewType("BookId", UUID)
TransactionHistoryId = NewType("TransactionHistoryId", UUID)
