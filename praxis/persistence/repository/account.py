"""PostgreSQL implementation of Account repository."""

from typing import Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Account
from praxis.domain.repository import AccountRepository
from praxis.domain.value import AccountId
from praxis.persistence.mappers import account_to_dict, row_to_account
from praxis.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[Account]:
        stmt = select(accounts_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_intra_id(self, intra_id: int) -> Optional[Account]:
        return await self._find_one(accounts_table.c.intra_id == intra_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        return await self._find_one(accounts_table.c.email == email)

    async def find_by_ids(self, account_ids: Sequence[AccountId]) -> list[Account]:
        if not account_ids:
            return []
        stmt = select(accounts_table).where(accounts_table.c.id.in_(account_ids))
        result = await self.session.execute(stmt)
        return [row_to_account(dict(row)) for row in result.mappings().all()]

    async def insert_if_absent(self, account: Account) -> Optional[Account]:
        """Insert with ``ON CONFLICT DO NOTHING``.

        Returns:
            The inserted account, or None when a conflicting row already exists
        """
        stmt = (
            insert(accounts_table)
            .values(**account_to_dict(account))
            .on_conflict_do_nothing()
            .returning(accounts_table)
        )
        # Savepoint keeps the request transaction usable if the FK check fails
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def update(self, account: Account) -> Account:
        data = account_to_dict(account)
        data.pop("id")
        data.pop("created_at")
        stmt = (
            update(accounts_table)
            .where(accounts_table.c.id == account.id)
            .values(**data)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return account

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(accounts_table)
        )
        return result.scalar_one()
