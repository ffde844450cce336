"""Login use case."""

import secrets

import logfire
from pydantic import BaseModel

from praxis.domain.error import AuthCodeMissing, AuthError, AuthStateMismatch
from praxis.domain.service import AccountService, AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request from the OAuth callback.

    ``code``, ``state`` and ``error`` come from the intra redirect;
    ``expected_state`` is the anti-forgery cookie set at login start.
    """

    code: str | None = None
    state: str | None = None
    error: str | None = None
    expected_state: str | None = None


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    account_id: str
    login: str


class LoginUseCase:
    """Use case for logging a 42 student in via OAuth."""

    def __init__(
        self,
        auth_service: AuthService,
        account_service: AccountService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: 42 OAuth domain service
            account_service: Account resolution service
            jwt_service: Session token service
        """
        self.auth_service = auth_service
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute the callback half of the login flow.

        Steps:
        1. Provider error is passed through as the error code
        2. State must match the stored cookie (before any network call)
        3. Code must be present
        4. Exchange code and fetch the 42 identity
        5. Resolve the identity to exactly one account and refresh it
        6. Issue one session token

        Args:
            request: Callback parameters and stored state

        Returns:
            Session token and account info

        Raises:
            AuthError: Any failure, carrying the code for the redirect
        """
        if request.error:
            logfire.warn("Provider returned an error", error=request.error)
            raise AuthError(f"Provider error: {request.error}", code=request.error)

        if not (
            request.state
            and request.expected_state
            and secrets.compare_digest(
                request.state.encode(), request.expected_state.encode()
            )
        ):
            logfire.warn(
                "OAuth state mismatch",
                has_state=bool(request.state),
                has_cookie=bool(request.expected_state),
            )
            raise AuthStateMismatch()

        if not request.code:
            raise AuthCodeMissing()

        with logfire.span("login"):
            identity = await self.auth_service.complete_login(request.code)
            account = await self.account_service.resolve(identity)
            token = self.jwt_service.issue_for(account)

            logfire.info(
                "Login completed",
                account_id=str(account.id),
                login=account.login.root,
            )
            return LoginResponse(
                token=token, account_id=str(account.id), login=account.login.root
            )
