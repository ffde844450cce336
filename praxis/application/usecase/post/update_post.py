"""Update post use case."""

from uuid import UUID

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.post.create_post import PostResponse
from praxis.application.usecase.post.list_posts import PostItem
from praxis.domain.error import NotFoundError
from praxis.domain.model import Account
from praxis.domain.service import PostService, ProjectService, VoteService
from praxis.domain.value import PostId, TargetType


def parse_post_id(raw: str) -> PostId:
    """Parse a path post id; malformed ids are simply unknown posts."""
    try:
        return PostId(UUID(raw))
    except ValueError:
        raise NotFoundError("Post", raw)


class UpdatePostRequest(CamelModel):
    """Partial README update: ``{title?, content?}``."""

    title: str | None = None
    content: str | None = None


class UpdatePostUseCase:
    """Use case for editing one's own README."""

    def __init__(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> None:
        self.project_service = project_service
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(
        self, slug: str, post_id: str, request: UpdatePostRequest, actor: Account
    ) -> PostResponse:
        """Update title and/or content.

        Raises:
            NotFoundError: If the project or post does not exist
            ValidationError: If the post is on another project or fields are invalid
            NotAuthorizedError: If the actor is not the author
        """
        project = await self.project_service.get_by_slug(slug)
        post = await self.post_service.get_owned_post(
            parse_post_id(post_id), project.id, actor.id
        )
        updated = await self.post_service.update_post(
            post, title=request.title, content=request.content
        )
        values = await self.vote_service.get_vote_values(TargetType.POST, [updated.id])
        return PostResponse(
            post=PostItem.from_post(updated, actor, values.get(updated.id))
        )
