"""Repository interfaces for the Praxis domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from praxis.domain.repository.account import AccountRepository
from praxis.domain.repository.auth_identity import AuthIdentityRepository
from praxis.domain.repository.comment import CommentRepository
from praxis.domain.repository.post import PostRepository
from praxis.domain.repository.project import ProjectRepository
from praxis.domain.repository.vote import VoteRepository

__all__ = [
    "AccountRepository",
    "AuthIdentityRepository",
    "CommentRepository",
    "PostRepository",
    "ProjectRepository",
    "VoteRepository",
]
