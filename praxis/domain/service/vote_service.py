"""Vote domain service.

A (user, target) pair is in one of three states: NoVote, Upvoted (+1) or
Downvoted (-1). ``transition`` is the whole state machine; the service maps
its action one-to-one onto a delete, update or insert.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from praxis.domain.error import ConflictError, NotFoundError, ValidationError
from praxis.domain.model import Vote
from praxis.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from praxis.domain.value import (
    VALID_VOTE_VALUES,
    AccountId,
    CommentId,
    PostId,
    TargetType,
    VoteAction,
    VoteId,
    VoteTransition,
)

from .base import Service


def transition(current: int | None, requested: int) -> VoteTransition:
    """Apply a requested vote value to the current state.

    | current | requested | new  | action  | delta |
    |---------|-----------|------|---------|-------|
    | None    | +1 / -1   | v    | created | v     |
    | None    | 0         | None | none    | 0     |
    | v       | v         | v    | none    | 0     |
    | v       | -v        | -v   | updated | -2v   |
    | v       | 0         | None | removed | -v    |

    Args:
        current: Stored value, None for NoVote
        requested: 1, -1 or 0 (clear)

    Returns:
        New state, mutation to perform and the score delta it implies

    Raises:
        ValidationError: If the requested value is not 1, -1 or 0
    """
    if requested not in VALID_VOTE_VALUES:
        raise ValidationError("Vote value must be 1, -1 or 0")

    if current is None:
        if requested == 0:
            return VoteTransition(new_value=None, action=VoteAction.NONE, delta=0)
        return VoteTransition(
            new_value=requested, action=VoteAction.CREATED, delta=requested
        )

    if requested == 0:
        return VoteTransition(new_value=None, action=VoteAction.REMOVED, delta=-current)
    if requested == current:
        return VoteTransition(new_value=current, action=VoteAction.NONE, delta=0)
    return VoteTransition(
        new_value=requested, action=VoteAction.UPDATED, delta=requested - current
    )


@dataclass
class VoteOutcome:
    """Result of a vote request.

    ``new_score`` is recomputed from the stored rows after the write.
    """

    action: VoteAction
    new_score: int
    user_vote: int | None


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_repository: Post repository (target existence)
            comment_repository: Comment repository (target existence)
        """
        self.vote_repository = vote_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def cast_vote(
        self,
        user_id: AccountId,
        target_type: TargetType,
        target_id: UUID,
        value: int,
    ) -> VoteOutcome:
        """Move the user's vote on a target to the requested value.

        Args:
            user_id: Voting account
            target_type: POST or COMMENT
            target_id: Post or comment ID
            value: 1, -1 or 0 (clear)

        Returns:
            Action taken and the target's recomputed score

        Raises:
            ValidationError: If value is not 1, -1 or 0
            NotFoundError: If the target does not exist (checked before writing)
            ConflictError: If a concurrent request inserted the same vote
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            target_type=target_type.value,
            target_id=str(target_id),
            value=value,
        ):
            if value not in VALID_VOTE_VALUES:
                raise ValidationError("Vote value must be 1, -1 or 0")

            await self._ensure_target_exists(target_type, target_id)

            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target_id
            )
            step = transition(existing.value if existing else None, value)

            if step.action == VoteAction.REMOVED and existing:
                await self.vote_repository.delete(existing.id)
            elif step.action == VoteAction.UPDATED and existing:
                await self.vote_repository.update_value(existing.id, value)
            elif step.action == VoteAction.CREATED:
                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    target_type=target_type,
                    target_id=target_id,
                    value=value,
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote insert",
                        user_id=str(user_id),
                        target_id=str(target_id),
                    )
                    raise ConflictError("Vote changed concurrently, retry")

            new_score = await self.vote_repository.sum_by_target(target_id)
            logfire.info(
                "Vote applied",
                action=step.action.value,
                target_id=str(target_id),
                new_score=new_score,
            )
            return VoteOutcome(
                action=step.action, new_score=new_score, user_vote=step.new_value
            )

    async def get_user_votes(
        self,
        user_id: AccountId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Map each target the user voted on to the stored value.

        Targets without a vote are omitted.
        """
        if not target_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_targets(
            user_id, target_type, target_ids
        )
        return {vote.target_id: vote.value for vote in votes}

    async def get_vote_values(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> dict[UUID, list[int]]:
        """Collect every vote value per target (batch query)."""
        values: dict[UUID, list[int]] = defaultdict(list)
        if not target_ids:
            return values

        for vote in await self.vote_repository.find_by_targets(target_type, target_ids):
            values[vote.target_id].append(vote.value)
        return values

    async def clear_votes(self, target_id: UUID) -> None:
        """Remove every vote on a target."""
        await self.vote_repository.delete_by_target(target_id)

    async def _ensure_target_exists(self, target_type: TargetType, target_id: UUID):
        if target_type == TargetType.POST:
            target = await self.post_repository.find_by_id(PostId(target_id))
        else:
            target = await self.comment_repository.find_by_id(CommentId(target_id))

        if target is None:
            logfire.warn(
                "Vote on non-existent target",
                target_type=target_type.value,
                target_id=str(target_id),
            )
            raise NotFoundError(target_type.value.capitalize(), str(target_id))
