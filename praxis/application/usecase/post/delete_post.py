"""Delete post use case."""

import logfire

from praxis.application.usecase.post.update_post import parse_post_id
from praxis.domain.model import Account
from praxis.domain.service import PostService, ProjectService, VoteService


class DeletePostUseCase:
    """Use case for removing one's own README and its votes."""

    def __init__(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
    ) -> None:
        self.project_service = project_service
        self.post_service = post_service
        self.vote_service = vote_service

    async def execute(self, slug: str, post_id: str, actor: Account) -> None:
        """Delete the post.

        Raises:
            NotFoundError: If the project or post does not exist
            ValidationError: If the post is on another project
            NotAuthorizedError: If the actor is not the author
        """
        project = await self.project_service.get_by_slug(slug)
        post = await self.post_service.get_owned_post(
            parse_post_id(post_id), project.id, actor.id
        )
        await self.vote_service.clear_votes(post.id)
        await self.post_service.delete_post(post)
        logfire.info("README and votes removed", post_id=str(post.id))
