"""Cast vote use case."""

from uuid import UUID

from praxis.application.usecase.base import CamelModel
from praxis.domain.error import ValidationError
from praxis.domain.model import Account
from praxis.domain.service import VoteService
from praxis.domain.value import TargetType, VoteAction


class CastVoteRequest(CamelModel):
    """Vote request body: ``{targetType, targetId, value}``.

    ``value`` is 1, -1 or 0 (clear the caller's vote).
    """

    target_type: TargetType
    target_id: str
    value: int


class CastVoteResponse(CamelModel):
    """Vote response: ``{action, newScore, userVote}``."""

    action: VoteAction
    new_score: int
    user_vote: int | None


class CastVoteUseCase:
    """Use case for up/down/clear votes on posts and comments."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest, voter: Account) -> CastVoteResponse:
        """Apply the vote.

        Raises:
            ValidationError: If the value or target id is invalid
            NotFoundError: If the target does not exist
        """
        try:
            target_id = UUID(request.target_id)
        except ValueError:
            raise ValidationError("targetId must be a UUID")

        outcome = await self.vote_service.cast_vote(
            user_id=voter.id,
            target_type=request.target_type,
            target_id=target_id,
            value=request.value,
        )
        return CastVoteResponse(
            action=outcome.action,
            new_score=outcome.new_score,
            user_vote=outcome.user_vote,
        )
