"""In-memory comment repository for testing."""

from typing import Optional

from praxis.domain.model import Comment
from praxis.domain.repository import CommentRepository
from praxis.domain.value import CommentId, ProjectId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        for comment in self._comments:
            if comment.id == comment_id:
                return comment
        return None

    async def find_by_project(self, project_id: ProjectId) -> list[Comment]:
        # Insertion order breaks created_at ties, like the id tiebreak in SQL
        comments = [c for c in self._comments if c.project_id == project_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def count_by_project(self, project_id: ProjectId) -> int:
        return sum(1 for c in self._comments if c.project_id == project_id)

    async def save(self, comment: Comment) -> Comment:
        self._comments.append(comment)
        return comment
