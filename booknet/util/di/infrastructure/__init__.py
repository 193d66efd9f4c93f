"""Infrastructure providers."""

from .persistence import InMemoryPersistenceProvider, PersistenceProvider

__all__ = [
    "InMemoryPersistenceProvider",
    "PersistenceProvider",
]
