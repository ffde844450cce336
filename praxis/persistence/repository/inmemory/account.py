"""In-memory account repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from praxis.domain.model import Account
from praxis.domain.repository import AccountRepository
from praxis.domain.value import AccountId


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Enforces the same uniqueness rules as the database: id, intra id and
    login (case-sensitive).
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def find_by_intra_id(self, intra_id: int) -> Optional[Account]:
        for account in self._accounts.values():
            if account.intra_id is not None and account.intra_id == intra_id:
                return account
        return None

    async def find_by_email(self, email: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        return [self._accounts[i] for i in account_ids if i in self._accounts]

    def _clashes(self, account: Account) -> bool:
        for other in self._accounts.values():
            if other.id == account.id:
                continue
            if account.intra_id is not None and other.intra_id == account.intra_id:
                return True
            if other.login.root == account.login.root:
                return True
        return False

    async def insert_if_absent(self, account: Account) -> Optional[Account]:
        if account.id in self._accounts or self._clashes(account):
            return None
        self._accounts[account.id] = account
        return account

    async def update(self, account: Account) -> Account:
        """Replace a stored account.

        Raises:
            IntegrityError: If the new intra id or login belongs to another account
        """
        if self._clashes(account):
            raise IntegrityError("Duplicate account key", None, Exception())
        self._accounts[account.id] = account
        return account

    async def count(self) -> int:
        return len(self._accounts)
