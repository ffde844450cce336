"""PostgreSQL repository implementations."""

from praxis.persistence.repository.account import PostgresAccountRepository
from praxis.persistence.repository.auth_identity import PostgresAuthIdentityRepository
from praxis.persistence.repository.comment import PostgresCommentRepository
from praxis.persistence.repository.post import PostgresPostRepository
from praxis.persistence.repository.project import PostgresProjectRepository
from praxis.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresAuthIdentityRepository",
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "PostgresProjectRepository",
    "PostgresVoteRepository",
]
