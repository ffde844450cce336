"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from praxis.domain.model.comment import Comment
from praxis.domain.value import CommentId, ProjectId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> list[Comment]:
        """Find all comments for a project as a flat list.

        Args:
            project_id: Project ID

        Returns:
            Comments ordered by creation time, oldest first
        """
        pass

    @abstractmethod
    async def count_by_project(self, project_id: ProjectId) -> int:
        """Count comments for a project."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        pass
