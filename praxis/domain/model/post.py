"""Post entity (project README)."""

from datetime import datetime

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import AccountId, PostId, ProjectId

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 50000


class Post(DomainModel):
    """Markdown guide written by a student for one project.

    Each author may publish one README per project.
    """

    id: PostId
    project_id: ProjectId
    author_id: AccountId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
