"""Get project use case."""

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.project.list_projects import ProjectItem
from praxis.domain.service import CommentService, PostService, ProjectService


class ProjectDetail(ProjectItem):
    """Project with content counts."""

    post_count: int
    comment_count: int


class GetProjectResponse(CamelModel):
    project: ProjectDetail


class GetProjectUseCase:
    """Use case for a single project page."""

    def __init__(
        self,
        project_service: ProjectService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        self.project_service = project_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, slug: str) -> GetProjectResponse:
        """Fetch a project by slug.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_service.get_by_slug(slug)
        item = ProjectItem.from_project(project)
        return GetProjectResponse(
            project=ProjectDetail(
                **item.model_dump(),
                post_count=await self.post_service.count_for_project(project.id),
                comment_count=await self.comment_service.count_for_project(project.id),
            )
        )
