"""Domain value objects for Praxis.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from praxis.domain.value.common import RootValueObject, ValueObject

# Mailbox every 42 student has; stands in when the intra reports no email
STUDENT_EMAIL_DOMAIN = "student.42.fr"


def student_email(login: str) -> str:
    return f"{login}@{STUDENT_EMAIL_DOMAIN}"


class Role(str, Enum):
    """Account role."""

    USER = "USER"
    ADMIN = "ADMIN"


class TargetType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "POST"
    COMMENT = "COMMENT"


class VoteAction(str, Enum):
    """Mutation applied by a vote request."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"
    NONE = "none"


class ProjectCategory(str, Enum):
    """Curriculum bucket assigned by admins."""

    NEW_CORE = "NEW_CORE"
    OLD_CORE = "OLD_CORE"
    PISCINE = "PISCINE"
    OTHER = "OTHER"


# Circle -1 marks projects outside the common core, 13 the post-core track
VALID_CIRCLES = frozenset({-1, 0, 1, 2, 3, 4, 5, 6, 13})

# Requested vote values; 0 clears the caller's vote
VALID_VOTE_VALUES = frozenset({-1, 0, 1})


class Login(RootValueObject[str]):
    """42 login handle. Case-sensitive, unique per account."""

    @field_validator("root")
    @classmethod
    def validate_login(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Login must be 1-64 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe project slug, as published by the 42 API."""

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        if not re.match(r"^[a-z0-9][a-z0-9._-]*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with dots, dashes or underscores"
            )
        if len(v) > 200:
            raise ValueError("Slug must be at most 200 characters")
        return v


class VoteTransition(ValueObject):
    """Result of applying a requested vote to the current state.

    ``new_value`` is None for NoVote.
    """

    new_value: int | None
    action: VoteAction
    delta: int


class FortyTwoIdentity(ValueObject):
    """Identity returned by the 42 intra ``/v2/me`` endpoint."""

    intra_id: int
    login: str
    email: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None
    campus: str | None = None
