"""Auth identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from praxis.domain.model.auth_identity import AuthIdentity
from praxis.domain.value import AccountId


class AuthIdentityRepository(ABC):
    """Repository for the identity store that accounts are keyed on."""

    @abstractmethod
    async def find_by_id(self, identity_id: AccountId) -> Optional[AuthIdentity]:
        """Find an identity by ID.

        Args:
            identity_id: The identity's unique identifier

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        """Find an identity by email.

        Args:
            email: Email address

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, identity: AuthIdentity) -> tuple[AuthIdentity, bool]:
        """Create an identity, or return the one already holding its email.

        Args:
            identity: The identity to create

        Returns:
            Tuple of (stored identity, whether this call created it)
        """
        pass

    @abstractmethod
    async def delete(self, identity_id: AccountId) -> None:
        """Delete an identity.

        Used to compensate when the matching account could not be created.

        Args:
            identity_id: The identity to delete
        """
        pass
