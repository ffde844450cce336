"""Unit tests for LoginUseCase."""

import pytest
from dishka import AsyncContainer

from praxis.adapter.fortytwo import MockFortyTwoOAuthClient
from praxis.application.usecase.auth.login import LoginRequest, LoginUseCase
from praxis.domain.error import AuthError
from praxis.domain.repository import AccountRepository
from praxis.domain.service import (
    AccountService,
    AuthService,
    JWTService,
    OAuthClient,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _callback(**overrides) -> LoginRequest:
    fields = {"code": "user-4242-jdoe", "state": "s1", "expected_state": "s1"}
    fields.update(overrides)
    return LoginRequest(**fields)


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_successful_login_issues_token_for_account(
        self, unit_env: AsyncContainer
    ):
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        account_repo = await unit_env.get(AccountRepository)

        response = await login_use_case.execute(_callback())

        assert response.login == "jdoe"
        payload = jwt_service.verify_token(response.token)
        assert payload.sub == response.account_id
        assert payload.login == "jdoe"
        account = await account_repo.find_by_intra_id(4242)
        assert str(account.id) == response.account_id

    @pytest.mark.asyncio
    async def test_relogin_returns_same_account(self, unit_env: AsyncContainer):
        login_use_case = await unit_env.get(LoginUseCase)

        first = await login_use_case.execute(_callback())
        second = await login_use_case.execute(
            _callback(code="user-4242-jdoe2", state="s2", expected_state="s2")
        )

        assert first.account_id == second.account_id
        assert second.login == "jdoe2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "state,expected_state",
        [("forged", "s1"), (None, "s1"), ("s1", None), (None, None)],
    )
    async def test_state_mismatch_fails_before_exchange(
        self, unit_env: AsyncContainer, state, expected_state
    ):
        login_use_case = await unit_env.get(LoginUseCase)
        oauth_client: MockFortyTwoOAuthClient = await unit_env.get(OAuthClient)

        with pytest.raises(AuthError) as exc_info:
            await login_use_case.execute(
                _callback(state=state, expected_state=expected_state)
            )

        assert exc_info.value.code == "invalid_state"
        assert oauth_client.exchange_calls == []

    @pytest.mark.asyncio
    async def test_provider_error_is_passed_through(self, unit_env: AsyncContainer):
        login_use_case = await unit_env.get(LoginUseCase)
        oauth_client: MockFortyTwoOAuthClient = await unit_env.get(OAuthClient)

        with pytest.raises(AuthError) as exc_info:
            await login_use_case.execute(_callback(code=None, error="access_denied"))

        assert exc_info.value.code == "access_denied"
        assert oauth_client.exchange_calls == []

    @pytest.mark.asyncio
    async def test_missing_code(self, unit_env: AsyncContainer):
        login_use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthError) as exc_info:
            await login_use_case.execute(_callback(code=None))

        assert exc_info.value.code == "no_code"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "code,error_code",
        [("bad_code", "token_exchange_failed"), ("no_identity", "user_fetch_failed")],
    )
    async def test_remote_failures_carry_their_code(
        self, unit_env: AsyncContainer, code, error_code
    ):
        login_use_case = await unit_env.get(LoginUseCase)
        account_repo = await unit_env.get(AccountRepository)

        with pytest.raises(AuthError) as exc_info:
            await login_use_case.execute(_callback(code=code))

        assert exc_info.value.code == error_code
        assert await account_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unconfigured_client_is_config_error(
        self, unit_env: AsyncContainer
    ):
        oauth_client = MockFortyTwoOAuthClient(configured=False)
        login_use_case = LoginUseCase(
            auth_service=AuthService(oauth_client=oauth_client),
            account_service=await unit_env.get(AccountService),
            jwt_service=await unit_env.get(JWTService),
        )

        with pytest.raises(AuthError) as exc_info:
            await login_use_case.execute(_callback())

        assert exc_info.value.code == "config_error"
        assert oauth_client.exchange_calls == []
