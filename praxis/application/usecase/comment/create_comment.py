"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from praxis.application.usecase.base import CamelModel
from praxis.application.usecase.comment.get_comments import CommentItem
from praxis.domain.error import ValidationError
from praxis.domain.model import Account
from praxis.domain.service import CommentNode, CommentService, ProjectService
from praxis.domain.value import CommentId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    project_slug: str
    content: str
    parent_comment_id: str | None = None


class CreateCommentResponse(CamelModel):
    """Create comment response: a leaf with no votes or replies."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for posting a comment or a reply."""

    def __init__(
        self, project_service: ProjectService, comment_service: CommentService
    ) -> None:
        self.project_service = project_service
        self.comment_service = comment_service

    async def execute(
        self, request: CreateCommentRequest, author: Account
    ) -> CreateCommentResponse:
        """Create the comment.

        Args:
            request: Target project, content and optional parent
            author: Authenticated caller

        Raises:
            NotFoundError: If the project or parent does not exist
            ValidationError: If the content is invalid or the parent id is
                malformed or belongs to another project
        """
        project = await self.project_service.get_by_slug(request.project_slug)

        parent_id = None
        if request.parent_comment_id:
            try:
                parent_id = CommentId(UUID(request.parent_comment_id))
            except ValueError:
                raise ValidationError("parentCommentId must be a UUID")

        comment = await self.comment_service.create_comment(
            project_id=project.id,
            author_id=author.id,
            content=request.content,
            parent_id=parent_id,
        )

        node = CommentNode(comment=comment, author=author, score=0, vote_count=0)
        return CreateCommentResponse(comment=CommentItem.from_node(node))
