"""Get comments use case."""

from datetime import datetime
from typing import Sequence

import logfire
from pydantic import BaseModel

from praxis.application.usecase.base import AccountSummary, CamelModel
from praxis.domain.service import (
    AccountService,
    CommentNode,
    CommentService,
    ProjectService,
    VoteService,
    build_comment_tree,
)
from praxis.domain.value import TargetType


class CommentItem(CamelModel):
    """Comment node with its replies, ordered by score."""

    id: str
    content: str
    author: AccountSummary | None
    created_at: datetime
    updated_at: datetime
    score: int
    vote_count: int
    replies: list["CommentItem"] = []

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        """Fields of a single node. ``replies`` is left empty."""
        return cls(
            id=str(node.comment.id),
            content=node.comment.content,
            author=AccountSummary.from_account(node.author) if node.author else None,
            created_at=node.comment.created_at,
            updated_at=node.comment.updated_at,
            score=node.score,
            vote_count=node.vote_count,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    project_slug: str


class GetCommentsResponse(CamelModel):
    """Get comments response, as documented in the API schema.

    Bodies are produced by ``render_comment_tree``.
    """

    comments: list[CommentItem]


# Marks the end of a node's replies on the render stack
_CLOSE = object()


def render_comment_tree(tree: Sequence[CommentNode]) -> str:
    """Serialize a comment tree to the ``GetCommentsResponse`` JSON body.

    Threads have no depth limit, so nodes are dumped one at a time and their
    ``replies`` arrays are spliced together from an explicit stack. The
    serializer never sees more than one level of nesting.
    """
    parts = ['{"comments":[']
    stack: list[object] = [_CLOSE]
    stack.extend(reversed([(node, i == 0) for i, node in enumerate(tree)]))

    while stack:
        entry = stack.pop()
        if entry is _CLOSE:
            parts.append("]}")
            continue

        node, first = entry
        if not first:
            parts.append(",")
        item = CommentItem.from_node(node).model_dump_json(
            by_alias=True, exclude={"replies"}
        )
        # Reopen the object to append its replies array
        parts.append(item[:-1])
        parts.append(',"replies":[')
        stack.append(_CLOSE)
        stack.extend(
            reversed([(reply, i == 0) for i, reply in enumerate(node.replies)])
        )

    return "".join(parts)


class GetCommentsUseCase:
    """Use case for the threaded comments of a project."""

    def __init__(
        self,
        project_service: ProjectService,
        comment_service: CommentService,
        vote_service: VoteService,
        account_service: AccountService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            project_service: Project lookup by slug
            comment_service: Comment domain service
            vote_service: Vote values for score aggregation
            account_service: Author lookup
        """
        self.project_service = project_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.account_service = account_service

    async def execute(self, request: GetCommentsRequest) -> list[CommentNode]:
        """Execute get comments flow.

        Comments, their votes and their authors are each loaded with one
        batch query, then assembled into the tree. Render the result with
        ``render_comment_tree``.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_service.get_by_slug(request.project_slug)
        comments = await self.comment_service.get_comments_for_project(project.id)

        comment_ids = [comment.id for comment in comments]
        vote_values = await self.vote_service.get_vote_values(
            TargetType.COMMENT, comment_ids
        )
        authors = await self.account_service.get_by_ids(
            [comment.author_id for comment in comments]
        )

        with logfire.span("build_comment_tree", count=len(comments)):
            return build_comment_tree(comments, vote_values, authors)
