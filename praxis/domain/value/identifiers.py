"""Strongly typed identifiers for Praxis domain entities."""

from typing import NewType
from uuid import UUID

# AccountId doubles as the AuthIdentity key: an account row shares the id of
# the identity-store record it was created for.
AccountId = NewType("AccountId", UUID)
ProjectId = NewType("ProjectId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
