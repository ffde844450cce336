"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from praxis.domain.model.account import Account
from praxis.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for Account aggregate.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_intra_id(self, intra_id: int) -> Optional[Account]:
        """Find an account by its 42 intra user id.

        Args:
            intra_id: Numeric id of the user on the 42 intra

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by its recorded email.

        Args:
            email: Email address

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        """Find several accounts at once (batch query).

        Args:
            account_ids: Account IDs

        Returns:
            Accounts found, in no particular order
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, account: Account) -> Optional[Account]:
        """Insert an account unless a row with a clashing key already exists.

        Conflicts on id, intra id or login are swallowed so that two
        concurrent first logins cannot both fail; the caller re-reads.

        Args:
            account: The account to insert

        Returns:
            The inserted account, or None if a conflicting row was present
        """
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Persist changes to an existing account.

        Args:
            account: The account with updated fields

        Returns:
            The saved account

        Raises:
            IntegrityError: If the update breaks a uniqueness constraint
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all accounts."""
        pass
