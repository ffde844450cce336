"""List projects use case."""

import math
from datetime import datetime

from pydantic import BaseModel, Field

from praxis.application.usecase.base import CamelModel
from praxis.domain.model import Project
from praxis.domain.service import ProjectService
from praxis.domain.value import ProjectCategory

MAX_PER_PAGE = 100


class ProjectItem(CamelModel):
    """Project in listings and lookups."""

    id: str
    slug: str
    title: str
    description: str | None
    forty_two_project_id: int | None
    category: ProjectCategory
    circle: int | None
    created_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectItem":
        return cls(
            id=str(project.id),
            slug=project.slug.root,
            title=project.title,
            description=project.description,
            forty_two_project_id=project.forty_two_project_id,
            category=project.category,
            circle=project.circle,
            created_at=project.created_at,
        )


class ListProjectsRequest(BaseModel):
    """List projects request."""

    category: ProjectCategory | None = None
    search: str | None = None
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=50, ge=1)


class Pagination(CamelModel):
    page: int
    per_page: int
    total: int
    total_pages: int


class ListProjectsResponse(CamelModel):
    """List projects response."""

    projects: list[ProjectItem]
    pagination: Pagination


class ListProjectsUseCase:
    """Use case for browsing the project catalogue."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """List one page of projects. ``per_page`` is capped at 100."""
        per_page = min(request.per_page, MAX_PER_PAGE)
        projects, total = await self.project_service.list_projects(
            category=request.category,
            search=request.search,
            page=request.page,
            per_page=per_page,
        )
        return ListProjectsResponse(
            projects=[ProjectItem.from_project(p) for p in projects],
            pagination=Pagination(
                page=request.page,
                per_page=per_page,
                total=total,
                total_pages=math.ceil(total / per_page),
            ),
        )
