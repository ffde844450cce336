"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from praxis.application.usecase.auth import GetCurrentUserUseCase
from praxis.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetMyVotesRequest,
    GetMyVotesResponse,
    GetMyVotesUseCase,
)
from praxis.config import Settings
from praxis.domain.value import TargetType
from praxis.interface.api.session import CurrentAccount, optional_account

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    voter: CurrentAccount,
    body: CastVoteRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote on a post or comment.

    ``value`` 1 or -1 sets the caller's vote, 0 clears it.

    Example:
        POST /votes
        {"targetType": "COMMENT", "targetId": "...", "value": 1}

        Response:
        {"action": "created", "newScore": 3, "userVote": 1}

    Raises:
        UnauthenticatedError: No valid session (401)
        NotFoundError: Target does not exist (404)
        ValidationError: Invalid value or target id (400)
    """
    response = await cast_vote_use_case.execute(body, voter)
    logfire.info(
        "Vote cast",
        voter_id=str(voter.id),
        target_id=body.target_id,
        action=response.action.value,
    )
    return response


@router.get("", response_model=GetMyVotesResponse)
async def get_my_votes(
    request: Request,
    get_my_votes_use_case: FromDishka[GetMyVotesUseCase],
    get_current_user: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
    target_type: TargetType = Query(alias="targetType"),
    target_ids: str = Query(default="", alias="targetIds"),
) -> GetMyVotesResponse:
    """Caller's votes on a comma-separated list of targets.

    Anonymous callers get an empty map.
    """
    voter = await optional_account(request, settings, get_current_user)
    return await get_my_votes_use_case.execute(
        GetMyVotesRequest(
            target_type=target_type,
            target_ids=[t for t in target_ids.split(",") if t.strip()],
        ),
        voter,
    )
