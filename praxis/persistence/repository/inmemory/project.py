"""In-memory project repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from praxis.domain.model import Project
from praxis.domain.repository import ProjectRepository
from praxis.domain.value import ProjectCategory, ProjectId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing."""

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        return self._projects.get(project_id)

    async def find_by_slug(self, slug: str) -> Optional[Project]:
        for project in self._projects.values():
            if project.slug.root == slug:
                return project
        return None

    def _matching(
        self, category: Optional[ProjectCategory], search: Optional[str]
    ) -> list[Project]:
        projects = list(self._projects.values())
        if category is not None:
            projects = [p for p in projects if p.category == category]
        if search:
            needle = search.lower()
            projects = [
                p
                for p in projects
                if needle in p.title.lower() or needle in p.slug.root
            ]
        return sorted(projects, key=lambda p: (p.title, str(p.id)))

    async def find_all(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
    ) -> list[Project]:
        return self._matching(category, search)[offset : offset + limit]

    async def count(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        return len(self._matching(category, search))

    async def find_forty_two_ids(self, forty_two_ids: Sequence[int]) -> set[int]:
        wanted = set(forty_two_ids)
        return {
            p.forty_two_project_id
            for p in self._projects.values()
            if p.forty_two_project_id in wanted
        }

    async def save(self, project: Project) -> Project:
        """Save a project.

        Raises:
            IntegrityError: If slug or 42 id belongs to another project
        """
        for other in self._projects.values():
            if other.id == project.id:
                continue
            if other.slug == project.slug or (
                project.forty_two_project_id is not None
                and other.forty_two_project_id == project.forty_two_project_id
            ):
                raise IntegrityError("Duplicate project", None, Exception())
        self._projects[project.id] = project
        return project
