"""List posts use case."""

from datetime import datetime

import logfire

from praxis.adapter.error import ProviderError
from praxis.application.usecase.base import AccountSummary, CamelModel
from praxis.domain.model import Account, Post, Project
from praxis.domain.service import (
    AccountService,
    PostService,
    ProfileService,
    ProjectService,
    VoteService,
)
from praxis.domain.value import TargetType


class PostItem(CamelModel):
    """README with its score."""

    id: str
    title: str
    content: str
    author: AccountSummary | None
    created_at: datetime
    updated_at: datetime
    score: int
    vote_count: int
    has_completed: bool = False

    @classmethod
    def from_post(
        cls,
        post: Post,
        author: Account | None,
        values: list[int] | None = None,
        has_completed: bool = False,
    ) -> "PostItem":
        values = values or []
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            author=AccountSummary.from_account(author) if author else None,
            created_at=post.created_at,
            updated_at=post.updated_at,
            score=sum(values),
            vote_count=len(values),
            has_completed=has_completed,
        )


class ListPostsResponse(CamelModel):
    posts: list[PostItem]


class ListPostsUseCase:
    """Use case for the READMEs of a project, best first."""

    def __init__(
        self,
        project_service: ProjectService,
        post_service: PostService,
        vote_service: VoteService,
        account_service: AccountService,
        profile_service: ProfileService,
    ) -> None:
        self.project_service = project_service
        self.post_service = post_service
        self.vote_service = vote_service
        self.account_service = account_service
        self.profile_service = profile_service

    async def execute(self, slug: str) -> ListPostsResponse:
        """List READMEs sorted by descending score.

        Each item says whether its author validated the project on the intra.
        That check is best effort: an intra failure counts as not completed.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_service.get_by_slug(slug)
        posts = await self.post_service.get_posts_for_project(project.id)

        vote_values = await self.vote_service.get_vote_values(
            TargetType.POST, [post.id for post in posts]
        )
        authors = await self.account_service.get_by_ids(
            [post.author_id for post in posts]
        )

        items = []
        for post in posts:
            author = authors.get(post.author_id)
            items.append(
                PostItem.from_post(
                    post,
                    author,
                    vote_values.get(post.id),
                    has_completed=await self._has_completed(author, project),
                )
            )
        items.sort(key=lambda item: item.score, reverse=True)
        return ListPostsResponse(posts=items)

    async def _has_completed(self, author: Account | None, project: Project) -> bool:
        if not author or author.intra_id is None or project.forty_two_project_id is None:
            return False
        try:
            return await self.profile_service.has_validated(
                author.intra_id, project.forty_two_project_id
            )
        except ProviderError as e:
            logfire.warn(
                "Could not check project completion",
                intra_id=author.intra_id,
                error=str(e),
            )
            return False
