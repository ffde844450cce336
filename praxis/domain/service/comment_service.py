"""Comment domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Sequence
from uuid import uuid4

import logfire

from praxis.domain.error import NotFoundError, ValidationError
from praxis.domain.model import Account, Comment
from praxis.domain.model.comment import CONTENT_MAX_LENGTH
from praxis.domain.model.common import utcnow
from praxis.domain.repository import CommentRepository
from praxis.domain.value import AccountId, CommentId, ProjectId

from .base import Service


@dataclass
class CommentNode:
    """Node in a project's comment thread.

    ``score`` is the sum of vote values and ``vote_count`` the number of vote
    rows, so one up and one down vote give score 0 with vote_count 2.
    """

    comment: Comment
    author: Optional[Account]
    score: int
    vote_count: int
    replies: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(
    comments: Sequence[Comment],
    vote_values: Mapping[CommentId, Sequence[int]],
    authors: Mapping[AccountId, Account] | None = None,
) -> list[CommentNode]:
    """Assemble a flat comment list into a tree ordered by score.

    Algorithm:
    1. Index comments by parent id in one pass (None marks a root)
    2. Materialize level by level from the root marker, using an explicit
       work list so thread depth is not bounded by the call stack
    3. Sort every sibling list by descending score; the sort is stable, so
       ties keep their input order

    Comments whose parent is not in ``comments`` are never reached from the
    root and are left out of the tree.

    Args:
        comments: Comments of one project, typically oldest first
        vote_values: Vote values per comment id
        authors: Author accounts by id

    Returns:
        Root nodes with replies populated at every depth
    """
    authors = authors or {}

    children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        children[comment.parent_id].append(comment)

    known_ids = {comment.id for comment in comments}
    orphans = [
        c for c in comments if c.parent_id is not None and c.parent_id not in known_ids
    ]
    if orphans:
        logfire.warn(
            "Dropping comments whose parent is missing",
            count=len(orphans),
            comment_ids=[str(c.id) for c in orphans],
        )

    def materialize(parent_id: Optional[CommentId]) -> list[CommentNode]:
        nodes = []
        for comment in children.get(parent_id, []):
            values = vote_values.get(comment.id, ())
            nodes.append(
                CommentNode(
                    comment=comment,
                    author=authors.get(comment.author_id),
                    score=sum(values),
                    vote_count=len(values),
                )
            )
        nodes.sort(key=lambda node: node.score, reverse=True)
        return nodes

    roots = materialize(None)
    pending = list(roots)
    while pending:
        node = pending.pop()
        node.replies = materialize(node.comment.id)
        pending.extend(node.replies)

    return roots


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        project_id: ProjectId,
        author_id: AccountId,
        content: str,
        parent_id: CommentId | None = None,
        now: datetime | None = None,
    ) -> Comment:
        """Create a comment on a project or reply to another comment.

        Args:
            project_id: Project ID
            author_id: Author account ID
            content: Comment text, stored trimmed
            parent_id: Parent comment ID for replies (None for root comments)
            now: Creation time (defaults to now)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long, or the parent
                belongs to another project
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            project_id=str(project_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = content.strip()
            if not text:
                raise ValidationError("Comment content is required")
            if len(text) > CONTENT_MAX_LENGTH:
                raise ValidationError(
                    f"Comment is too long (max {CONTENT_MAX_LENGTH} characters)"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.project_id != project_id:
                    logfire.warn(
                        "Parent comment does not belong to project",
                        parent_id=str(parent_id),
                        parent_project_id=str(parent.project_id),
                        target_project_id=str(project_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this project"
                    )

            created_at = now or utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                project_id=project_id,
                author_id=author_id,
                content=text,
                parent_id=parent_id,
                created_at=created_at,
                updated_at=created_at,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                project_id=str(project_id),
            )
            return saved

    async def get_comments_for_project(self, project_id: ProjectId) -> list[Comment]:
        """Get all comments for a project, oldest first."""
        with logfire.span(
            "comment_service.get_comments_for_project", project_id=str(project_id)
        ):
            comments = await self.comment_repository.find_by_project(project_id)
            logfire.info(
                "Comments retrieved for project",
                project_id=str(project_id),
                count=len(comments),
            )
            return comments

    async def count_for_project(self, project_id: ProjectId) -> int:
        """Count comments on a project."""
        return await self.comment_repository.count_by_project(project_id)
