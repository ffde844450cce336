"""Comment entity.

Comments form arbitrary-depth threads under a project. A comment without a
parent is a root comment.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import AccountId, CommentId, ProjectId

CONTENT_MAX_LENGTH = 10000


class Comment(DomainModel):
    """Comment on a project or reply to another comment."""

    id: CommentId
    project_id: ProjectId
    author_id: AccountId
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
