"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from praxis.domain.model.post import Post
from praxis.domain.value import AccountId, PostId, ProjectId


class PostRepository(ABC):
    """Repository for README posts."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> list[Post]:
        """Find all posts for a project, oldest first."""
        pass

    @abstractmethod
    async def find_by_author_and_project(
        self, author_id: AccountId, project_id: ProjectId
    ) -> Optional[Post]:
        """Find the README an author wrote for a project, if any."""
        pass

    @abstractmethod
    async def count_by_project(self, project_id: ProjectId) -> int:
        """Count posts for a project."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Raises:
            IntegrityError: If the author already has a post for the project
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        pass
