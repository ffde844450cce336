"""Session token extraction shared by the routers."""

from typing import Annotated

from fastapi import Depends, Request

from praxis.application.usecase.auth import GetCurrentUserUseCase
from praxis.config import Settings
from praxis.domain.error import UnauthenticatedError
from praxis.domain.model import Account


def session_token(request: Request, settings: Settings) -> str | None:
    """Token from ``Authorization: Bearer``, falling back to the session cookie."""
    authorization = request.headers.get("authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return request.cookies.get(settings.auth.session_cookie_name)


async def optional_account(
    request: Request,
    settings: Settings,
    get_current_user: GetCurrentUserUseCase,
) -> Account | None:
    """Caller's account, or None when unauthenticated."""
    return await get_current_user.authenticate(session_token(request, settings))


async def require_account(
    request: Request,
    settings: Settings,
    get_current_user: GetCurrentUserUseCase,
) -> Account:
    """Caller's account.

    Raises:
        UnauthenticatedError: If no valid session accompanies the request
    """
    account = await optional_account(request, settings, get_current_user)
    if account is None:
        raise UnauthenticatedError()
    return account


async def authenticated_account(request: Request) -> Account:
    """Dependency form of ``require_account``.

    FastAPI solves dependencies before it validates the request body, so
    routes declaring ``CurrentAccount`` answer 401 to anonymous callers
    even when the body is invalid.
    """
    container = request.state.dishka_container
    return await require_account(
        request,
        await container.get(Settings),
        await container.get(GetCurrentUserUseCase),
    )


CurrentAccount = Annotated[Account, Depends(authenticated_account)]
