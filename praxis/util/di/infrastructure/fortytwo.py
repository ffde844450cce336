"""42 intra infrastructure providers."""

from dishka import Scope, provide

from praxis.adapter.fortytwo import (
    RealFortyTwoApiClient,
    RealFortyTwoOAuthClient,
    TokenCache,
)
from praxis.config import AuthSettings, FortyTwoSettings
from praxis.domain.service import FortyTwoApiClient, OAuthClient
from praxis.util.di.base import ProviderBase


class FortyTwoProvider(ProviderBase):
    """42 intra component base."""

    __mock_component__ = "fortytwo"


class ProdFortyTwoProvider(FortyTwoProvider):
    """Production 42 provider talking to api.intra.42.fr."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_oauth_client(self, auth_settings: AuthSettings) -> OAuthClient:
        """Provide 42 OAuth client.

        Missing credentials are reported per login attempt (config_error),
        so the client is built even when they are empty.
        """
        return RealFortyTwoOAuthClient(
            settings=auth_settings.fortytwo,
            redirect_uri=auth_settings.callback_url,
        )

    @provide(scope=Scope.APP)
    def get_token_cache(self, fortytwo_settings: FortyTwoSettings) -> TokenCache:
        """Provide the app token cache shared across requests."""
        return TokenCache(margin=fortytwo_settings.token_expiry_margin)

    @provide(scope=Scope.APP)
    def get_api_client(
        self, fortytwo_settings: FortyTwoSettings, token_cache: TokenCache
    ) -> FortyTwoApiClient:
        """Provide public 42 API client."""
        return RealFortyTwoApiClient(
            settings=fortytwo_settings, token_cache=token_cache
        )
