"""Get my votes use case."""

from uuid import UUID

from pydantic import BaseModel

from praxis.application.usecase.base import CamelModel
from praxis.domain.model import Account
from praxis.domain.service import VoteService
from praxis.domain.value import TargetType


class GetMyVotesRequest(BaseModel):
    """Targets to look up, as sent in ``?targetType=&targetIds=a,b,c``."""

    target_type: TargetType
    target_ids: list[str]


class GetMyVotesResponse(CamelModel):
    """Caller's vote per target id. Missing keys mean no vote."""

    votes: dict[str, int]


class GetMyVotesUseCase:
    """Use case for the caller's current votes on a batch of targets."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(
        self, request: GetMyVotesRequest, voter: Account | None
    ) -> GetMyVotesResponse:
        """Return the caller's votes; empty when unauthenticated."""
        if voter is None:
            return GetMyVotesResponse(votes={})

        target_ids = []
        for raw in request.target_ids:
            try:
                target_ids.append(UUID(raw.strip()))
            except ValueError:
                continue  # Unknown ids have no vote either

        votes = await self.vote_service.get_user_votes(
            voter.id, request.target_type, target_ids
        )
        return GetMyVotesResponse(
            votes={str(target_id): value for target_id, value in votes.items()}
        )
