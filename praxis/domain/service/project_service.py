"""Project domain service."""

from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from praxis.domain.error import NotFoundError, ValidationError
from praxis.domain.model import Project
from praxis.domain.repository import ProjectRepository
from praxis.domain.value import VALID_CIRCLES, ProjectCategory, ProjectId, Slug

from .base import Service


@dataclass(frozen=True)
class DiscoveredProject:
    """Project seen in a 42 profile's ``projects_users``."""

    forty_two_id: int
    name: str
    slug: str


@dataclass
class SyncResult:
    """Outcome of a project discovery sync."""

    added: int
    existing: int


class ProjectService(Service):
    """Domain service for the project catalogue."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
        """
        self.project_repository = project_repository

    async def get_by_slug(self, slug: str) -> Project:
        """Get a project by slug.

        Raises:
            NotFoundError: If no project has this slug
        """
        with logfire.span("project_service.get_by_slug", slug=slug):
            project = await self.project_repository.find_by_slug(slug)
            if not project:
                logfire.warn("Project not found", slug=slug)
                raise NotFoundError("Project", slug)
            return project

    async def list_projects(
        self,
        category: Optional[ProjectCategory],
        search: Optional[str],
        page: int,
        per_page: int,
    ) -> tuple[list[Project], int]:
        """List one page of projects ordered by title.

        Returns:
            Tuple of (projects on the page, total matching projects)
        """
        with logfire.span(
            "project_service.list_projects",
            category=category.value if category else None,
            search=search,
            page=page,
        ):
            search = search.strip() if search else None
            projects = await self.project_repository.find_all(
                category=category,
                search=search or None,
                offset=(page - 1) * per_page,
                limit=per_page,
            )
            total = await self.project_repository.count(
                category=category, search=search or None
            )
            return projects, total

    async def categorize(
        self,
        slug: str,
        category: Optional[ProjectCategory],
        circle: Optional[int],
    ) -> Project:
        """Set a project's category and/or circle.

        Args:
            slug: Project slug
            category: New category, or None to keep the current one
            circle: New circle, or None to keep the current one

        Raises:
            ValidationError: If the circle is not allowed or nothing changes
            NotFoundError: If the project does not exist
        """
        if category is None and circle is None:
            raise ValidationError("Nothing to update")
        if circle is not None and circle not in VALID_CIRCLES:
            raise ValidationError(
                f"Circle must be one of {sorted(VALID_CIRCLES)}"
            )

        project = await self.get_by_slug(slug)

        update: dict = {}
        if category is not None:
            update["category"] = category
        if circle is not None:
            update["circle"] = circle

        saved = await self.project_repository.save(project.model_copy(update=update))
        logfire.info(
            "Project categorized",
            slug=slug,
            category=saved.category.value,
            circle=saved.circle,
        )
        return saved

    async def sync_discovered(self, projects: Sequence[DiscoveredProject]) -> SyncResult:
        """Add projects seen on 42 profiles that the catalogue lacks.

        New projects land in category OTHER until an admin curates them.
        Projects are deduplicated by 42 id.
        """
        unique = {p.forty_two_id: p for p in projects}
        if not unique:
            return SyncResult(added=0, existing=0)

        with logfire.span("project_service.sync_discovered", seen=len(unique)):
            known = await self.project_repository.find_forty_two_ids(list(unique))

            added = 0
            for forty_two_id, discovered in unique.items():
                if forty_two_id in known:
                    continue
                try:
                    await self.project_repository.save(
                        Project(
                            id=ProjectId(uuid4()),
                            slug=Slug(discovered.slug),
                            title=discovered.name,
                            forty_two_project_id=forty_two_id,
                        )
                    )
                    added += 1
                except (IntegrityError, ValueError) as e:
                    # Slug taken by another 42 project, or a slug we can't store
                    logfire.warn(
                        "Skipped discovered project",
                        slug=discovered.slug,
                        error=str(e),
                    )

            logfire.info("Projects synced", added=added, existing=len(known))
            return SyncResult(added=added, existing=len(known))
