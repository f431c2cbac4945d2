"""Identity service infrastructure providers."""

from dishka import Scope, provide

from tkchat.adapter.identity.client import RealIdentityClient
from tkchat.config import IdentitySettings
from tkchat.domain.service import IdentityClient
from tkchat.util.di.base import ProviderBase
from tkchat.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: IdentitySettings) -> IdentityClient:
        """Provide identity service client.

        Raises:
            ConfigurationError: If the service role key is not configured
        """
        if not settings.service_role_key:
            raise ConfigurationError(
                "IDENTITY__SERVICE_ROLE_KEY",
                "Identity service role key must be configured",
            )

        return RealIdentityClient(
            base_url=settings.url,
            anon_key=settings.anon_key,
            service_role_key=settings.service_role_key,
            timeout=settings.request_timeout_seconds,
        )
