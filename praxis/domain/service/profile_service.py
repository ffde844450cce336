"""Profile domain service.

Builds a 42cursus-focused summary out of a raw intra user payload and feeds
every project it mentions into the catalogue.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import logfire

from praxis.domain.error import NotFoundError

from .base import Service
from .project_service import DiscoveredProject, ProjectService

FINISHED_LIMIT = 10
ACHIEVEMENTS_LIMIT = 20


class FortyTwoApiClient:
    """Public 42 API client interface (client-credentials grant)."""

    async def get_user(self, login_or_id: str) -> Optional[dict[str, Any]]:
        """Fetch a user by login or numeric id.

        Returns:
            Raw ``/v2/users/{login_or_id}`` payload, or None when unknown

        Raises:
            ProviderError: If the intra answers with anything but 200 or 404
        """
        raise NotImplementedError


@dataclass
class ProjectProgress:
    """One ``projects_users`` entry."""

    id: int
    name: str
    slug: str
    status: str
    final_mark: Optional[int]
    validated: Optional[bool]
    marked_at: Optional[str]
    updated_at: Optional[str]
    occurrence: int = 0


@dataclass
class CursusSummary:
    level: float
    grade: Optional[str]
    blackholed_at: Optional[str]
    skills: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class ProfileUser:
    id: int
    login: str
    display_name: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    avatar_url: Optional[str]
    location: Optional[str]
    correction_points: int
    wallet: int
    pool_month: Optional[str]
    pool_year: Optional[str]
    campus: Optional[str]


@dataclass
class ProfileSummary:
    """Public profile as shown on a user page."""

    user: ProfileUser
    cursus: Optional[CursusSummary]
    in_progress_projects: list[ProjectProgress]
    finished_projects: list[ProjectProgress]
    achievements: list[dict[str, Any]]
    total_projects: int
    finished_count: int
    in_progress_count: int


def _project_progress(entry: dict[str, Any]) -> ProjectProgress:
    project = entry.get("project") or {}
    return ProjectProgress(
        id=project.get("id", 0),
        name=project.get("name", ""),
        slug=project.get("slug", ""),
        status=entry.get("status", ""),
        final_mark=entry.get("final_mark"),
        validated=entry.get("validated?"),
        marked_at=entry.get("marked_at"),
        updated_at=entry.get("updated_at"),
        occurrence=entry.get("occurrence") or 0,
    )


def summarize_profile(payload: dict[str, Any], main_cursus_id: int) -> ProfileSummary:
    """Reduce a raw intra user payload to the profile summary.

    Args:
        payload: ``/v2/users/{login}`` response body
        main_cursus_id: Cursus whose level and projects are shown

    Returns:
        In-progress projects of the main cursus sorted by last update, the ten
        most recently marked finished projects and up to twenty visible
        achievements
    """
    image = payload.get("image") or {}
    campuses = payload.get("campus") or []
    user = ProfileUser(
        id=payload["id"],
        login=payload["login"],
        display_name=payload.get("displayname"),
        first_name=payload.get("first_name"),
        last_name=payload.get("last_name"),
        avatar_url=image.get("link"),
        location=payload.get("location"),
        correction_points=payload.get("correction_point") or 0,
        wallet=payload.get("wallet") or 0,
        pool_month=payload.get("pool_month"),
        pool_year=payload.get("pool_year"),
        campus=campuses[0].get("name") if campuses else None,
    )

    cursus = None
    for cursus_user in payload.get("cursus_users") or []:
        if cursus_user.get("cursus_id") == main_cursus_id:
            cursus = CursusSummary(
                level=cursus_user.get("level") or 0.0,
                grade=cursus_user.get("grade"),
                blackholed_at=cursus_user.get("blackholed_at"),
                skills=cursus_user.get("skills") or [],
            )
            break

    entries = payload.get("projects_users") or []
    in_progress = [
        _project_progress(e)
        for e in entries
        if e.get("status") != "finished"
        and main_cursus_id in (e.get("cursus_ids") or [])
    ]
    in_progress.sort(key=lambda p: p.updated_at or "", reverse=True)

    finished = [
        _project_progress(e) for e in entries if e.get("status") == "finished"
    ]
    finished.sort(key=lambda p: p.marked_at or "", reverse=True)

    achievements = [
        a for a in payload.get("achievements") or [] if a.get("visible", True)
    ][:ACHIEVEMENTS_LIMIT]

    return ProfileSummary(
        user=user,
        cursus=cursus,
        in_progress_projects=in_progress,
        finished_projects=finished[:FINISHED_LIMIT],
        achievements=achievements,
        total_projects=len(entries),
        finished_count=len(finished),
        in_progress_count=len(in_progress),
    )


def discovered_projects(payload: dict[str, Any]) -> list[DiscoveredProject]:
    """Projects referenced by a payload's ``projects_users``."""
    found = []
    for entry in payload.get("projects_users") or []:
        project = entry.get("project") or {}
        if project.get("id") and project.get("slug") and project.get("name"):
            found.append(
                DiscoveredProject(
                    forty_two_id=project["id"],
                    name=project["name"],
                    slug=project["slug"],
                )
            )
    return found


class ProfileService(Service):
    """Domain service for 42 profiles."""

    def __init__(
        self,
        api_client: FortyTwoApiClient,
        project_service: ProjectService,
        main_cursus_id: int,
    ) -> None:
        """Initialize profile service.

        Args:
            api_client: Public 42 API client
            project_service: Catalogue that receives discovered projects
            main_cursus_id: Cursus shown on profiles (21 is 42cursus)
        """
        self.api_client = api_client
        self.project_service = project_service
        self.main_cursus_id = main_cursus_id

    async def get_profile(self, login: str) -> ProfileSummary:
        """Fetch and summarize a 42 profile, syncing its projects.

        Raises:
            NotFoundError: If the intra does not know the login
            ProviderError: If the intra request fails
        """
        with logfire.span("profile_service.get_profile", login=login):
            payload = await self.api_client.get_user(login)
            if payload is None:
                raise NotFoundError("User", login)

            result = await self.project_service.sync_discovered(
                discovered_projects(payload)
            )
            if result.added:
                logfire.info(
                    "Discovered new projects from profile",
                    login=login,
                    added=result.added,
                )

            return summarize_profile(payload, self.main_cursus_id)

    async def has_validated(self, intra_id: int, forty_two_project_id: int) -> bool:
        """Whether the intra user finished and validated a project.

        Raises:
            ProviderError: If the intra request fails
        """
        payload = await self.api_client.get_user(str(intra_id))
        if payload is None:
            return False
        for entry in payload.get("projects_users") or []:
            project = entry.get("project") or {}
            if (
                project.get("id") == forty_two_project_id
                and entry.get("status") == "finished"
            ):
                return entry.get("validated?") is True
        return False
