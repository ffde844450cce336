"""In-memory auth identity repository for testing."""

from typing import Optional

from praxis.domain.model import AuthIdentity
from praxis.domain.repository import AuthIdentityRepository
from praxis.domain.value import AccountId


class InMemoryAuthIdentityRepository(AuthIdentityRepository):
    """In-memory implementation of AuthIdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: dict[AccountId, AuthIdentity] = {}
        self.deleted: list[AccountId] = []

    async def find_by_id(self, identity_id: AccountId) -> Optional[AuthIdentity]:
        return self._identities.get(identity_id)

    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        for identity in self._identities.values():
            if identity.email == email:
                return identity
        return None

    async def create(self, identity: AuthIdentity) -> tuple[AuthIdentity, bool]:
        existing = await self.find_by_email(identity.email)
        if existing:
            return existing, False
        self._identities[identity.id] = identity
        return identity, True

    async def delete(self, identity_id: AccountId) -> None:
        if self._identities.pop(identity_id, None) is not None:
            self.deleted.append(identity_id)
