"""PostgreSQL implementation of Vote repository."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Vote
from praxis.domain.repository import VoteRepository
from praxis.domain.value import AccountId, TargetType, VoteId
from praxis.persistence.mappers import row_to_vote, vote_to_dict
from praxis.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self, user_id: AccountId, target_id: UUID
    ) -> Optional[Vote]:
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> list[Vote]:
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def find_by_user_and_targets(
        self,
        user_id: AccountId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on several targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def sum_by_target(self, target_id: UUID) -> int:
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.target_id == target_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: If the user already voted on the target
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
        return vote

    async def update_value(self, vote_id: VoteId, value: int) -> None:
        stmt = update(votes_table).where(votes_table.c.id == vote_id).values(value=value)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, vote_id: VoteId) -> None:
        await self.session.execute(delete(votes_table).where(votes_table.c.id == vote_id))
        await self.session.flush()

    async def delete_by_target(self, target_id: UUID) -> None:
        stmt = delete(votes_table).where(votes_table.c.target_id == target_id)
        await self.session.execute(stmt)
        await self.session.flush()
