"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from praxis.domain.model import Vote
from praxis.domain.repository import VoteRepository
from praxis.domain.value import AccountId, TargetType, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_user_and_target(
        self, user_id: AccountId, target_id: UUID
    ) -> Optional[Vote]:
        for vote in self._votes:
            if vote.user_id == user_id and vote.target_id == target_id:
                return vote
        return None

    async def find_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> list[Vote]:
        wanted = set(target_ids)
        return [
            v
            for v in self._votes
            if v.target_type == target_type and v.target_id in wanted
        ]

    async def find_by_user_and_targets(
        self,
        user_id: AccountId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        return [
            v
            for v in await self.find_by_targets(target_type, target_ids)
            if v.user_id == user_id
        ]

    async def sum_by_target(self, target_id: UUID) -> int:
        return sum(v.value for v in self._votes if v.target_id == target_id)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the target
        """
        if await self.find_by_user_and_target(vote.user_id, vote.target_id):
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes.append(vote)
        return vote

    async def update_value(self, vote_id: VoteId, value: int) -> None:
        self._votes = [
            v.model_copy(update={"value": value}) if v.id == vote_id else v
            for v in self._votes
        ]

    async def delete(self, vote_id: VoteId) -> None:
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_by_target(self, target_id: UUID) -> None:
        self._votes = [v for v in self._votes if v.target_id != target_id]
