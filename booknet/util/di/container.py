"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from booknet.config import Settings
from booknet.domain.service import CredentialVerifier
from booknet.util.di import CORE_PROVIDERS, InMemoryPersistenceProvider
from booknet.util.di.infrastructure import PersistenceProvider
from booknet.util.error import ConfigurationError, DependencyInjectionError


def create_container(
    credential_verifier: CredentialVerifier,
    settings: Settings | None = None,
    persistence: PersistenceProvider | None = None,
) -> AsyncContainer:
    """Build the application container.

    Args:
        credential_verifier: Verifier owning the credential algorithm
        settings: Settings to use; loaded from the environment when omitted
        persistence: Persistence provider; in-memory when omitted

    Returns:
        Configured DI container

    Raises:
        DependencyInjectionError: If the verifier is not a CredentialVerifier
        ConfigurationError: If production would run on in-memory persistence
    """
    if not isinstance(credential_verifier, CredentialVerifier):
        raise DependencyInjectionError(
            f"Expected a CredentialVerifier, got {type(credential_verifier).__name__}"
        )

    settings = settings or Settings()
    if persistence is None and settings.environment == "production":
        raise ConfigurationError("In-memory persistence cannot be used in production")

    provider_instances = [provider() for provider in CORE_PROVIDERS]
    provider_instances.append(persistence or InMemoryPersistenceProvider())

    return make_async_container(
        *provider_instances,
        context={
            Settings: settings,
            CredentialVerifier: credential_verifier,
        },
    )
