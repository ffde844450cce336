"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_my_votes import GetMyVotesRequest, GetMyVotesResponse, GetMyVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetMyVotesRequest",
    "GetMyVotesResponse",
    "GetMyVotesUseCase",
]
