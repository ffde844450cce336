"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from praxis.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from praxis.application.usecase.auth.get_current_user import GetCurrentUserRequest
from praxis.application.usecase.auth.login import LoginRequest
from praxis.application.usecase.base import AccountInfo
from praxis.config import Settings
from praxis.domain.error import AuthError, AuthServiceMisconfigured, UnauthenticatedError
from praxis.domain.service import AuthService
from praxis.interface.api.session import session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    message: str


class WhoAmIResponse(BaseModel):
    """Current account claims."""

    user: AccountInfo


class SessionResponse(BaseModel):
    """Authentication status that never fails for anonymous callers."""

    authenticated: bool
    user: AccountInfo | None = None


def _client_callback(settings: Settings, **params: str) -> str:
    return f"{settings.api.frontend_url}/auth/callback?{urlencode(params)}"


@router.get("/login-start")
async def login_start(
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
):
    """Redirect the browser to the 42 intra authorization page.

    A random anti-forgery state is stored in a short-lived httpOnly cookie
    and checked again by the callback.

    Returns:
        HTTP 302 redirect to the intra, or 500 ``config_error`` when the
        client credentials are missing
    """
    state = secrets.token_urlsafe(32)
    try:
        auth_url = auth_service.initiate_login(state)
    except AuthServiceMisconfigured as e:
        logger.error(f"Cannot start login: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.code, "details": str(e)},
        )

    response = RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=settings.auth.state_cookie_name,
        value=state,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
        max_age=settings.auth.state_max_age,
    )
    logger.info("Login started, redirecting to 42 intra")
    return response


@router.get("/callback")
async def callback(
    request: Request,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
):
    """Complete the 42 login.

    Every outcome is a redirect to the frontend callback page: ``?token=``
    on success (with the session cookie set as well), ``?error=<code>`` on
    failure. The state cookie is always cleared.

    Example:
        GET /auth/callback?code=abc123&state=xyz789

        Redirects to: http://localhost:3000/auth/callback?token=eyJ...
        Sets cookie: praxis_session
    """
    expected_state = request.cookies.get(settings.auth.state_cookie_name)

    try:
        login_response = await login_use_case.execute(
            LoginRequest(
                code=code, state=state, error=error, expected_state=expected_state
            )
        )
    except AuthError as e:
        logger.warning(f"Login failed: code={e.code}, message={e}")
        response = RedirectResponse(
            url=_client_callback(settings, error=e.code),
            status_code=status.HTTP_302_FOUND,
        )
    except Exception as e:
        logger.exception(f"Unexpected error during OAuth callback: {e}")
        response = RedirectResponse(
            url=_client_callback(settings, error="server_error"),
            status_code=status.HTTP_302_FOUND,
        )
    else:
        logger.info(f"Login successful for {login_response.login}")
        response = RedirectResponse(
            url=_client_callback(settings, token=login_response.token),
            status_code=status.HTTP_302_FOUND,
        )
        response.set_cookie(
            key=settings.auth.session_cookie_name,
            value=login_response.token,
            httponly=True,
            secure=settings.is_production,
            samesite="lax",
            path="/",
            max_age=settings.auth.session_max_age,
        )

    response.delete_cookie(key=settings.auth.state_cookie_name, path="/")
    return response


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Clear the session cookie.

    Clients holding the token from the callback redirect must drop it too.
    """
    response.delete_cookie(key=settings.auth.session_cookie_name, path="/")
    return LogoutResponse(message="Successfully logged out")


@router.get("/whoami", response_model=WhoAmIResponse)
async def whoami(
    request: Request,
    get_current_user: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> WhoAmIResponse:
    """Return the caller's account claims, or 401.

    Accepts ``Authorization: Bearer <token>`` or the session cookie.
    """
    user = await get_current_user.execute(
        GetCurrentUserRequest(token=session_token(request, settings))
    )
    if user is None:
        raise UnauthenticatedError()
    return WhoAmIResponse(user=user)


@router.get("/session", response_model=SessionResponse)
async def session(
    request: Request,
    get_current_user: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Authentication status; anonymous callers get ``authenticated: false``."""
    user = await get_current_user.execute(
        GetCurrentUserRequest(token=session_token(request, settings))
    )
    return SessionResponse(authenticated=user is not None, user=user)
