"""Unit tests for the public 42 API client."""

import httpx
import pytest

from praxis.adapter.error import ProviderError
from praxis.adapter.fortytwo import RealFortyTwoApiClient, TokenCache
from praxis.config import FortyTwoSettings
from tests.conftest import make_intra_user


class FakeIntra:
    """Token endpoint plus ``/v2/users`` backed by a dict."""

    def __init__(self, users: dict | None = None):
        self.users = users or {}
        self.token_requests = 0
        self.revoked: set[str] = set()
        self.user_status: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/oauth/token":
            self.token_requests += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"app-token-{self.token_requests}",
                    "expires_in": 7200,
                },
            )

        token = request.headers["Authorization"].removeprefix("Bearer ")
        if token in self.revoked:
            return httpx.Response(401)
        if self.user_status is not None:
            return httpx.Response(self.user_status)

        login = request.url.path.removeprefix("/v2/users/")
        if login not in self.users:
            return httpx.Response(404)
        return httpx.Response(200, json=self.users[login])


def _client(intra: FakeIntra, **settings) -> RealFortyTwoApiClient:
    fortytwo = FortyTwoSettings(
        client_id=settings.pop("client_id", "uid"),
        client_secret=settings.pop("client_secret", "secret"),
    )
    return RealFortyTwoApiClient(
        fortytwo, TokenCache(), transport=httpx.MockTransport(intra)
    )


class TestGetUser:
    @pytest.mark.asyncio
    async def test_returns_payload(self):
        intra = FakeIntra({"jdoe": make_intra_user(login="jdoe")})

        user = await _client(intra).get_user("jdoe")

        assert user["login"] == "jdoe"

    @pytest.mark.asyncio
    async def test_unknown_login_is_none(self):
        assert await _client(FakeIntra()).get_user("nobody") is None

    @pytest.mark.asyncio
    async def test_app_token_is_cached_across_calls(self):
        intra = FakeIntra({"jdoe": make_intra_user(login="jdoe")})
        client = _client(intra)

        await client.get_user("jdoe")
        await client.get_user("jdoe")
        await client.get_user("nobody")

        assert intra.token_requests == 1

    @pytest.mark.asyncio
    async def test_revoked_token_is_refreshed_once(self):
        intra = FakeIntra({"jdoe": make_intra_user(login="jdoe")})
        client = _client(intra)
        await client.get_user("jdoe")
        intra.revoked.add("app-token-1")

        user = await client.get_user("jdoe")

        assert user["login"] == "jdoe"
        assert intra.token_requests == 2

    @pytest.mark.asyncio
    async def test_server_error_raises_provider_error(self):
        intra = FakeIntra()
        intra.user_status = 503

        with pytest.raises(ProviderError) as exc_info:
            await _client(intra).get_user("jdoe")

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_missing_credentials_raise_provider_error(self):
        intra = FakeIntra()

        with pytest.raises(ProviderError):
            await _client(intra, client_secret="").get_user("jdoe")

        assert intra.token_requests == 0

    @pytest.mark.asyncio
    async def test_transport_error_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = RealFortyTwoApiClient(
            FortyTwoSettings(client_id="uid", client_secret="secret"),
            TokenCache(),
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(ProviderError):
            await client.get_user("jdoe")
