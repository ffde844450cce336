"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from uuid import UUID

from praxis.domain.model.vote import Vote
from praxis.domain.value import AccountId, TargetType, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self, user_id: AccountId, target_id: UUID
    ) -> Optional[Vote]:
        """Find a user's vote on a target.

        The target type is not part of the key: one row per (user, target).

        Args:
            user_id: The user's ID
            target_id: Post or comment ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> list[Vote]:
        """Find all votes on several targets (batch query).

        Args:
            target_type: Type of the targets
            target_ids: Target IDs

        Returns:
            Votes from every user on the given targets
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: AccountId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on several targets (batch query)."""
        pass

    @abstractmethod
    async def sum_by_target(self, target_id: UUID) -> int:
        """Sum of vote values on a target, 0 when it has none."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the user already voted on this target
        """
        pass

    @abstractmethod
    async def update_value(self, vote_id: VoteId, value: int) -> None:
        """Change the value of an existing vote."""
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        pass

    @abstractmethod
    async def delete_by_target(self, target_id: UUID) -> None:
        """Delete every vote on a target (used when the target goes away)."""
        pass
