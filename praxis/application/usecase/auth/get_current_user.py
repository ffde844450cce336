"""Get current user use case."""

from pydantic import BaseModel

from praxis.application.usecase.base import AccountInfo
from praxis.domain.model import Account
from praxis.domain.service import AccountService, JWTService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # Bearer header or session cookie


class GetCurrentUserUseCase:
    """Resolve the caller from a session token.

    Verification is local (signature and expiry) followed by a fresh account
    lookup. Every failure means "unauthenticated", never an exception.
    """

    def __init__(self, jwt_service: JWTService, account_service: AccountService):
        self.jwt_service = jwt_service
        self.account_service = account_service

    async def authenticate(self, token: str | None) -> Account | None:
        """Return the account behind a session token, or None."""
        account_id = self.jwt_service.get_account_id_from_token(token)
        if account_id is None:
            return None
        return await self.account_service.get_by_id(account_id)

    async def execute(self, request: GetCurrentUserRequest) -> AccountInfo | None:
        """Return the authenticated account's info, or None."""
        account = await self.authenticate(request.token)
        if account is None:
            return None
        return AccountInfo.from_account(account)
