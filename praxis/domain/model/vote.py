"""Vote entity.

A missing row means NoVote. Stored values are only ever +1 or -1.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import AccountId, TargetType, VoteId


class Vote(DomainModel):
    """Up or down vote on a post or comment.

    Business rules:
    - At most one vote per (user, target), whatever the target type
    - Score of a target is the sum of its vote values
    """

    id: VoteId
    user_id: AccountId
    target_type: TargetType
    target_id: UUID  # PostId or CommentId
    value: Literal[-1, 1]
    created_at: datetime = Field(default_factory=utcnow)
