"""JWT token domain service."""

from uuid import UUID

import logfire

from praxis.config import AuthSettings
from praxis.domain.model import Account
from praxis.domain.value import AccountId
from praxis.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue_for(self, account: Account) -> str:
        """Issue a session token for an account.

        Args:
            account: Authenticated account

        Returns:
            Signed token carrying ``{sub, login, email}``
        """
        with logfire.span("jwt_service.issue_for", account_id=str(account.id)):
            token = create_token(
                str(account.id),
                account.login.root,
                account.derived_email,
                self.auth_settings,
            )
            logfire.info("Session token issued", account_id=str(account.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify session token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        return verify_token(token, self.auth_settings)

    def get_account_id_from_token(self, token: str | None) -> AccountId | None:
        """Extract the account ID from a token without raising.

        Args:
            token: Session token (optional)

        Returns:
            Account ID if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return AccountId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "Session verification failed, treating as unauthenticated",
                error=str(e),
            )
            return None
