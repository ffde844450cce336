"""PostgreSQL implementation of AuthIdentity repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import AuthIdentity
from praxis.domain.repository import AuthIdentityRepository
from praxis.domain.value import AccountId
from praxis.persistence.mappers import auth_identity_to_dict, row_to_auth_identity
from praxis.persistence.tables import auth_identities_table


class PostgresAuthIdentityRepository(AuthIdentityRepository):
    """PostgreSQL implementation of AuthIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, identity_id: AccountId) -> Optional[AuthIdentity]:
        stmt = select(auth_identities_table).where(
            auth_identities_table.c.id == identity_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_auth_identity(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[AuthIdentity]:
        stmt = select(auth_identities_table).where(
            auth_identities_table.c.email == email
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_auth_identity(dict(row)) if row else None

    async def create(self, identity: AuthIdentity) -> tuple[AuthIdentity, bool]:
        """Insert an identity, yielding to a concurrent insert of the same email.

        Returns:
            The stored identity and whether this call created it
        """
        stmt = (
            insert(auth_identities_table)
            .values(**auth_identity_to_dict(identity))
            .on_conflict_do_nothing(index_elements=["email"])
            .returning(auth_identities_table.c.id)
        )
        result = await self.session.execute(stmt)
        created = result.first() is not None
        await self.session.flush()
        if created:
            return identity, True

        existing = await self.find_by_email(identity.email)
        if existing is None:
            raise LookupError(f"Auth identity vanished for {identity.email}")
        return existing, False

    async def delete(self, identity_id: AccountId) -> None:
        stmt = delete(auth_identities_table).where(
            auth_identities_table.c.id == identity_id
        )
        await self.session.execute(stmt)
        await self.session.flush()
