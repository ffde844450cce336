"""Domain value objects for Praxis."""

from praxis.domain.value.identifiers import (
    AccountId,
    CommentId,
    PostId,
    ProjectId,
    VoteId,
)
from praxis.domain.value.types import (
    VALID_CIRCLES,
    VALID_VOTE_VALUES,
    FortyTwoIdentity,
    Login,
    ProjectCategory,
    Role,
    Slug,
    TargetType,
    VoteAction,
    VoteTransition,
)

__all__ = [
    # Identifiers
    "AccountId",
    "ProjectId",
    "PostId",
    "CommentId",
    "VoteId",
    # Types
    "FortyTwoIdentity",
    "Login",
    "ProjectCategory",
    "Role",
    "Slug",
    "TargetType",
    "VoteAction",
    "VoteTransition",
    "VALID_CIRCLES",
    "VALID_VOTE_VALUES",
]
