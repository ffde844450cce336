"""Project entity.

Curriculum projects are discovered from 42 profiles and categorized by admins.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from praxis.domain.model.common import DomainModel, utcnow
from praxis.domain.value import ProjectCategory, ProjectId, Slug


class Project(DomainModel):
    """42 curriculum project."""

    id: ProjectId
    slug: Slug
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    forty_two_project_id: Optional[int] = None
    category: ProjectCategory = ProjectCategory.OTHER
    circle: Optional[int] = None
    created_at: datetime = Field(default_factory=utcnow)
