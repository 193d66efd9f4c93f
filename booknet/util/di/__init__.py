"""Dependency injection module."""

from typing import Type

from booknet.util.di.application import ProdApplicationProvider
from booknet.util.di.base import ProviderBase
from booknet.util.di.core import ProdConfigProvider
from booknet.util.di.domain import ProdDomainProvider
from booknet.util.di.infrastructure import (
    InMemoryPersistenceProvider,
    PersistenceProvider,
)

# Providers that are always used as-is
CORE_PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]

__all__ = [
    "CORE_PROVIDERS",
    "ProviderBase",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "InMemoryPersistenceProvider",
]
