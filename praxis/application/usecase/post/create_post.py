"""Create post use case."""

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.post.list_posts import PostItem
from praxis.domain.model import Account
from praxis.domain.service import PostService, ProjectService


class CreatePostRequest(CamelModel):
    """README body: ``{title, content}``."""

    title: str
    content: str


class PostResponse(CamelModel):
    post: PostItem


class CreatePostUseCase:
    """Use case for publishing a README."""

    def __init__(
        self, project_service: ProjectService, post_service: PostService
    ) -> None:
        self.project_service = project_service
        self.post_service = post_service

    async def execute(
        self, slug: str, request: CreatePostRequest, author: Account
    ) -> PostResponse:
        """Publish the caller's README on a project.

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If title or content is invalid
            ConflictError: If the caller already has a README there
        """
        project = await self.project_service.get_by_slug(slug)
        post = await self.post_service.create_post(
            project_id=project.id,
            author_id=author.id,
            title=request.title,
            content=request.content,
        )
        return PostResponse(post=PostItem.from_post(post, author))
