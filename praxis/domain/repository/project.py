"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from praxis.domain.model.project import Project
from praxis.domain.value import ProjectCategory, ProjectId


class ProjectRepository(ABC):
    """Repository for Project entity."""

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Project]:
        """Find a project by slug.

        Args:
            slug: Project slug

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
    ) -> list[Project]:
        """List projects ordered by title.

        Args:
            category: Only projects in this category
            search: Case-insensitive substring of title or slug
            offset: Number of projects to skip
            limit: Maximum number of projects to return

        Returns:
            Page of projects
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count projects matching the same filters as ``find_all``."""
        pass

    @abstractmethod
    async def find_forty_two_ids(self, forty_two_ids: Sequence[int]) -> set[int]:
        """Return which of the given 42 project ids are already stored."""
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Raises:
            IntegrityError: If slug or 42 id is already taken by another row
        """
        pass
