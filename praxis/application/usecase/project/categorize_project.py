"""Categorize project use case."""

import logfire

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.project.list_projects import ProjectItem
from praxis.domain.error import NotAuthorizedError
from praxis.domain.model import Account
from praxis.domain.service import ProjectService
from praxis.domain.value import ProjectCategory


class CategorizeProjectRequest(CamelModel):
    """Admin update body: ``{category?, circle?}``."""

    category: ProjectCategory | None = None
    circle: int | None = None


class CategorizeProjectResponse(CamelModel):
    project: ProjectItem


class CategorizeProjectUseCase:
    """Use case for admins curating the catalogue."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(
        self, slug: str, request: CategorizeProjectRequest, actor: Account
    ) -> CategorizeProjectResponse:
        """Set category and/or circle.

        Raises:
            NotAuthorizedError: If the actor is not an admin
            ValidationError: If the update is empty or the circle is invalid
            NotFoundError: If the project does not exist
        """
        if not actor.is_admin:
            logfire.warn(
                "Non-admin tried to categorize project",
                account_id=str(actor.id),
                slug=slug,
            )
            raise NotAuthorizedError("project", slug, str(actor.id))

        project = await self.project_service.categorize(
            slug, category=request.category, circle=request.circle
        )
        return CategorizeProjectResponse(project=ProjectItem.from_project(project))
