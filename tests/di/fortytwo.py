"""Mock 42 intra providers for testing."""

from dishka import Scope, provide

from praxis.adapter.fortytwo import (
    MockFortyTwoApiClient,
    MockFortyTwoOAuthClient,
    TokenCache,
)
from praxis.domain.service import FortyTwoApiClient, OAuthClient
from praxis.util.di.infrastructure.fortytwo import FortyTwoProvider


class MockFortyTwoProvider(FortyTwoProvider):
    """Mock 42 provider: scripted OAuth exchange and in-memory user directory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_oauth_client(self) -> OAuthClient:
        """Provide mock 42 OAuth client."""
        return MockFortyTwoOAuthClient()

    @provide(scope=Scope.APP)
    def get_token_cache(self) -> TokenCache:
        """Provide token cache."""
        return TokenCache()

    @provide(scope=Scope.APP)
    def get_api_client(self) -> FortyTwoApiClient:
        """Provide mock public 42 API client."""
        return MockFortyTwoApiClient()
