"""Domain services."""

from .account_service import (
    AccountResolver,
    AccountService,
    CreateAccountResolver,
    EmailResolver,
    IntraIdResolver,
)
from .auth_service import AuthService, OAuthClient
from .base import Service
from .comment_service import CommentNode, CommentService, build_comment_tree
from .jwt_service import JWTService
from .post_service import PostService
from .profile_service import FortyTwoApiClient, ProfileService, ProfileSummary
from .project_service import DiscoveredProject, ProjectService, SyncResult
from .vote_service import VoteOutcome, VoteService, transition

__all__ = [
    "AccountResolver",
    "AccountService",
    "AuthService",
    "CommentNode",
    "CommentService",
    "CreateAccountResolver",
    "DiscoveredProject",
    "EmailResolver",
    "FortyTwoApiClient",
    "IntraIdResolver",
    "JWTService",
    "OAuthClient",
    "PostService",
    "ProfileService",
    "ProfileSummary",
    "ProjectService",
    "Service",
    "SyncResult",
    "VoteOutcome",
    "VoteService",
    "build_comment_tree",
    "transition",
]
