"""Start the identity subsystem inside a host application."""

import sys

from dishka import AsyncContainer
import logfire

from booknet.config import Settings
from booknet.domain.service import CredentialVerifier
from booknet.util.di.container import create_container
from booknet.util.di.infrastructure import PersistenceProvider
from booknet.util.logging import get_logger, setup_logging
from booknet.util.observability import configure_logfire

logger = get_logger(__name__)


def bootstrap(
    credential_verifier: CredentialVerifier,
    settings: Settings | None = None,
    persistence: PersistenceProvider | None = None,
) -> AsyncContainer:
    """Configure logging and Logfire, then build the container.

    Args:
        credential_verifier: Verifier owning the credential algorithm
        settings: Settings to use; loaded from the environment when omitted
        persistence: Persistence provider; in-memory when omitted

    Returns:
        Configured DI container
    """
    settings = settings or Settings()

    # Configure observability early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        container = create_container(credential_verifier, settings, persistence)
    except Exception as e:
        logfire.error(
            "Identity startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logger.info("Identity container ready: environment=%s", settings.environment)
    return container
