"""Get profile use case."""

from typing import Any

from praxis.application.usecase.base import CamelModel
from praxis.domain.service import ProfileService, ProfileSummary
from praxis.domain.service.profile_service import ProjectProgress


class ProfileUserInfo(CamelModel):
    id: int
    login: str
    display_name: str | None
    first_name: str | None
    last_name: str | None
    avatar_url: str | None
    location: str | None
    correction_points: int
    wallet: int
    pool_month: str | None
    pool_year: str | None
    campus: str | None


class CursusInfo(CamelModel):
    level: float
    grade: str | None
    blackholed_at: str | None
    skills: list[dict[str, Any]]


class ProjectProgressItem(CamelModel):
    id: int
    name: str
    slug: str
    status: str
    final_mark: int | None
    validated: bool | None
    marked_at: str | None
    updated_at: str | None

    @classmethod
    def from_progress(cls, progress: ProjectProgress) -> "ProjectProgressItem":
        return cls(
            id=progress.id,
            name=progress.name,
            slug=progress.slug,
            status=progress.status,
            final_mark=progress.final_mark,
            validated=progress.validated,
            marked_at=progress.marked_at,
            updated_at=progress.updated_at,
        )


class ProfileStats(CamelModel):
    total_projects: int
    finished_projects: int
    in_progress_projects: int


class GetProfileResponse(CamelModel):
    """42 profile summary focused on the main cursus."""

    user: ProfileUserInfo
    cursus: CursusInfo | None
    in_progress_projects: list[ProjectProgressItem]
    finished_projects: list[ProjectProgressItem]
    achievements: list[dict[str, Any]]
    stats: ProfileStats

    @classmethod
    def from_summary(cls, summary: ProfileSummary) -> "GetProfileResponse":
        user = summary.user
        return cls(
            user=ProfileUserInfo(
                id=user.id,
                login=user.login,
                display_name=user.display_name,
                first_name=user.first_name,
                last_name=user.last_name,
                avatar_url=user.avatar_url,
                location=user.location,
                correction_points=user.correction_points,
                wallet=user.wallet,
                pool_month=user.pool_month,
                pool_year=user.pool_year,
                campus=user.campus,
            ),
            cursus=(
                CursusInfo(
                    level=summary.cursus.level,
                    grade=summary.cursus.grade,
                    blackholed_at=summary.cursus.blackholed_at,
                    skills=summary.cursus.skills,
                )
                if summary.cursus
                else None
            ),
            in_progress_projects=[
                ProjectProgressItem.from_progress(p)
                for p in summary.in_progress_projects
            ],
            finished_projects=[
                ProjectProgressItem.from_progress(p) for p in summary.finished_projects
            ],
            achievements=summary.achievements,
            stats=ProfileStats(
                total_projects=summary.total_projects,
                finished_projects=summary.finished_count,
                in_progress_projects=summary.in_progress_count,
            ),
        )


class GetProfileUseCase:
    """Use case for a 42 profile page."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, login: str) -> GetProfileResponse:
        """Fetch the profile and sync the projects it mentions.

        Raises:
            NotFoundError: If the intra does not know the login
            ProviderError: If the intra request fails
        """
        summary = await self.profile_service.get_profile(login)
        return GetProfileResponse.from_summary(summary)
