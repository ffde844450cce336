"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .auth_identity import InMemoryAuthIdentityRepository
from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .project import InMemoryProjectRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryAuthIdentityRepository",
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryProjectRepository",
    "InMemoryVoteRepository",
]
