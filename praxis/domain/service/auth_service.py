"""Authentication domain service."""

import logfire

from praxis.domain.error import AuthServiceMisconfigured
from praxis.domain.value import FortyTwoIdentity

from .base import Service


class OAuthClient:
    """OAuth client interface for the 42 intra."""

    @property
    def is_configured(self) -> bool:
        """Whether client id and secret are both present."""
        raise NotImplementedError

    def authorization_url(self, state: str) -> str:
        """Build the URL that starts the authorization code flow.

        Args:
            state: Anti-forgery state echoed back on the callback

        Returns:
            Authorization URL to redirect the browser to
        """
        raise NotImplementedError

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Raises:
            AuthCodeExchangeFailed: If the token endpoint rejects the code
        """
        raise NotImplementedError

    async def fetch_identity(self, access_token: str) -> FortyTwoIdentity:
        """Fetch the caller's profile with an access token.

        Raises:
            AuthIdentityFetchFailed: If the profile request fails
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service driving the 42 OAuth exchange."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: 42 intra OAuth client
        """
        self.oauth_client = oauth_client

    def ensure_configured(self) -> None:
        """Raise config_error when client credentials are missing."""
        if not self.oauth_client.is_configured:
            logfire.error("42 OAuth client credentials are not configured")
            raise AuthServiceMisconfigured("42 OAuth client is not configured")

    def initiate_login(self, state: str) -> str:
        """Return the authorization URL for a fresh login.

        Raises:
            AuthServiceMisconfigured: If client credentials are missing
        """
        self.ensure_configured()
        return self.oauth_client.authorization_url(state)

    async def complete_login(self, code: str) -> FortyTwoIdentity:
        """Exchange the code and fetch the remote identity.

        Args:
            code: Authorization code from the callback

        Returns:
            Identity reported by the intra
        """
        self.ensure_configured()
        with logfire.span("auth_service.complete_login"):
            access_token = await self.oauth_client.exchange_code(code)
            identity = await self.oauth_client.fetch_identity(access_token)
            logfire.info(
                "42 identity fetched",
                intra_id=identity.intra_id,
                login=identity.login,
            )
            return identity
