"""Domain model entities for Praxis."""

from praxis.domain.model.account import Account
from praxis.domain.model.auth_identity import AuthIdentity
from praxis.domain.model.comment import Comment
from praxis.domain.model.post import Post
from praxis.domain.model.project import Project
from praxis.domain.model.vote import Vote

__all__ = [
    "Account",
    "AuthIdentity",
    "Comment",
    "Post",
    "Project",
    "Vote",
]
