"""Test doubles and container for testing."""

from .container import build_test_container
from .credential import PlainTextCredentialVerifier

__all__ = [
    "PlainTextCredentialVerifier",
    "build_test_container",
]
