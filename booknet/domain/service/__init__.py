"""Domain services."""

from .account_status import STATUS_CHECK_ORDER, AccountStatusChecker
from .auth_service import AuthService, CredentialVerifier
from .base import Service
from .user_service import UserService

__all__ = [
    "AccountStatusChecker",
    "AuthService",
    "CredentialVerifier",
    "STATUS_CHECK_ORDER",
    "Service",
    "UserService",
]
