"""Core DI providers."""

from dishka import Scope, from_context, provide

from booknet.config import AuthSettings, Settings
from booknet.domain.service import CredentialVerifier
from booknet.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings and the credential verifier are handed to the container as
    context when it is built.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)
    credential_verifier = from_context(provides=CredentialVerifier, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
