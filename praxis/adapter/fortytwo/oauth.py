"""42 intra OAuth 2.0 client.

Implements the authorization code flow with a confidential client.
"""

from urllib.parse import urlencode

import httpx
import logfire

from praxis.config import FortyTwoSettings
from praxis.domain.error import AuthCodeExchangeFailed, AuthIdentityFetchFailed
from praxis.domain.service.auth_service import OAuthClient
from praxis.domain.value import FortyTwoIdentity


def identity_from_payload(data: dict) -> FortyTwoIdentity:
    """Map a ``/v2/me`` (or ``/v2/users/...``) payload to an identity.

    The display name is ``first_name last_name``, falling back to the
    intra's ``displayname`` when both are empty.
    """
    full_name = f"{data.get('first_name') or ''} {data.get('last_name') or ''}".strip()
    image = data.get("image") or {}
    campuses = data.get("campus") or []
    return FortyTwoIdentity(
        intra_id=data["id"],
        login=data["login"],
        email=data.get("email"),
        display_name=full_name or data.get("displayname"),
        avatar_url=image.get("link"),
        campus=campuses[0].get("name") if campuses else None,
    )


class FortyTwoOAuthClient(OAuthClient):
    """Base class for 42 OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealFortyTwoOAuthClient(FortyTwoOAuthClient):
    """OAuth client talking to the real 42 intra."""

    def __init__(
        self,
        settings: FortyTwoSettings,
        redirect_uri: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize 42 OAuth client.

        Args:
            settings: Client credentials, endpoints and timeout
            redirect_uri: Callback URL registered with the intra application
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        self.settings = settings
        self.redirect_uri = redirect_uri
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.client_id and self.settings.client_secret)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.timeout, transport=self._transport
        )

    def authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.settings.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": self.settings.scope,
            "state": state,
        }
        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> str:
        """Exchange authorization code for an access token.

        Raises:
            AuthCodeExchangeFailed: Non-2xx answer or transport error
        """
        data = {
            "grant_type": "authorization_code",
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with self._client() as client:
                response = await client.post(self.settings.token_url, data=data)
        except httpx.HTTPError as e:
            logfire.error("42 token exchange HTTP error", error=str(e))
            raise AuthCodeExchangeFailed(f"HTTP error during token exchange: {e}")

        if not response.is_success:
            logfire.error(
                "42 token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise AuthCodeExchangeFailed(
                f"Token exchange failed: {response.status_code}"
            )

        access_token = response.json().get("access_token")
        if not access_token:
            raise AuthCodeExchangeFailed("Token response carried no access token")
        return access_token

    async def fetch_identity(self, access_token: str) -> FortyTwoIdentity:
        """Fetch the authenticated user from ``/v2/me``.

        Raises:
            AuthIdentityFetchFailed: Non-2xx answer, transport error or a
                payload without id/login
        """
        try:
            async with self._client() as client:
                response = await client.get(
                    f"{self.settings.api_base_url}/v2/me",
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("42 user info HTTP error", error=str(e))
            raise AuthIdentityFetchFailed(f"HTTP error fetching user info: {e}")

        if not response.is_success:
            logfire.error(
                "42 user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise AuthIdentityFetchFailed(
                f"User info request failed: {response.status_code}"
            )

        try:
            return identity_from_payload(response.json())
        except (KeyError, ValueError) as e:
            raise AuthIdentityFetchFailed(f"Malformed user payload: {e}")


class MockFortyTwoOAuthClient(FortyTwoOAuthClient):
    """Mock 42 OAuth client for testing.

    Returns deterministic identities without network access. Every code is
    accepted except ``bad_code``; the access token encodes the code, and codes
    of the form ``user-<intra_id>-<login>`` yield that identity.
    ``exchange_calls`` records each exchanged code.
    """

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.exchange_calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def authorization_url(self, state: str) -> str:
        return f"https://api.intra.42.fr/oauth/authorize?state={state}&mock=true"

    async def exchange_code(self, code: str) -> str:
        self.exchange_calls.append(code)
        if code == "bad_code":
            raise AuthCodeExchangeFailed("Mock token endpoint rejected the code")
        return f"token-{code}"

    async def fetch_identity(self, access_token: str) -> FortyTwoIdentity:
        code = access_token.removeprefix("token-")
        if code == "no_identity":
            raise AuthIdentityFetchFailed("Mock /v2/me failed")

        intra_id, login = 4242, "mockuser"
        parts = code.split("-", 2)
        if len(parts) == 3 and parts[0] == "user" and parts[1].isdigit():
            intra_id, login = int(parts[1]), parts[2]

        return FortyTwoIdentity(
            intra_id=intra_id,
            login=login,
            email=f"{login}@student.42.fr",
            display_name=f"Mock {login}",
            avatar_url=f"https://cdn.intra.42.fr/users/{login}.jpg",
            campus="Paris",
        )
