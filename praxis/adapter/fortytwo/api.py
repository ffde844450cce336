"""Public 42 API client (client-credentials grant)."""

from typing import Any, Optional

import httpx
import logfire

from praxis.adapter.error import ProviderError
from praxis.adapter.fortytwo.token_cache import TokenCache
from praxis.config import FortyTwoSettings
from praxis.domain.service.profile_service import FortyTwoApiClient


class RealFortyTwoApiClient(FortyTwoApiClient):
    """Calls ``api.intra.42.fr`` with an application token.

    The token is requested once and reused from ``token_cache`` until it is
    about to expire.
    """

    def __init__(
        self,
        settings: FortyTwoSettings,
        token_cache: TokenCache,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.token_cache = token_cache
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            timeout=self.settings.timeout,
            transport=self._transport,
        )

    async def _app_token(self, client: httpx.AsyncClient) -> str:
        cached = self.token_cache.get()
        if cached:
            return cached

        if not (self.settings.client_id and self.settings.client_secret):
            raise ProviderError("42 API credentials are not configured")

        response = await client.post(
            self.settings.token_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret,
            },
        )
        if not response.is_success:
            logfire.error(
                "42 app token request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                f"App token request failed: {response.status_code}",
                status_code=response.status_code,
            )

        body = response.json()
        self.token_cache.put(body["access_token"], int(body.get("expires_in", 7200)))
        logfire.info("42 app token refreshed")
        return body["access_token"]

    async def get_user(self, login_or_id: str) -> Optional[dict[str, Any]]:
        """Fetch ``/v2/users/{login_or_id}``.

        Returns:
            User payload, or None on 404

        Raises:
            ProviderError: Transport error or any other non-2xx status
        """
        with logfire.span("fortytwo_api.get_user", login=login_or_id):
            try:
                async with self._client() as client:
                    token = await self._app_token(client)
                    response = await client.get(
                        f"/v2/users/{login_or_id}",
                        headers={"Authorization": f"Bearer {token}"},
                    )
                    if response.status_code == 401:
                        # Token revoked early; drop it and retry once
                        self.token_cache.clear()
                        token = await self._app_token(client)
                        response = await client.get(
                            f"/v2/users/{login_or_id}",
                            headers={"Authorization": f"Bearer {token}"},
                        )
            except httpx.HTTPError as e:
                logfire.error("42 API HTTP error", error=str(e))
                raise ProviderError(f"HTTP error calling 42 API: {e}")

            if response.status_code == 404:
                return None
            if not response.is_success:
                logfire.error(
                    "42 API request failed",
                    status_code=response.status_code,
                    login=login_or_id,
                )
                raise ProviderError(
                    f"42 API request failed: {response.status_code}",
                    status_code=response.status_code,
                )
            return response.json()


class MockFortyTwoApiClient(FortyTwoApiClient):
    """In-memory 42 API for testing.

    ``users`` maps login (and stringified intra id) to a payload. Unknown
    logins return None.
    """

    def __init__(self, users: dict[str, dict[str, Any]] | None = None):
        self.users: dict[str, dict[str, Any]] = {}
        for payload in (users or {}).values():
            self.add_user(payload)

    def add_user(self, payload: dict[str, Any]) -> None:
        self.users[payload["login"]] = payload
        self.users[str(payload["id"])] = payload

    async def get_user(self, login_or_id: str) -> Optional[dict[str, Any]]:
        return self.users.get(login_or_id)
