"""Project catalogue routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from praxis.application.usecase.project import (
    CategorizeProjectRequest,
    CategorizeProjectResponse,
    CategorizeProjectUseCase,
    GetProjectResponse,
    GetProjectUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
)
from praxis.domain.value import ProjectCategory
from praxis.interface.api.session import CurrentAccount

router = APIRouter(prefix="/projects", tags=["projects"], route_class=DishkaRoute)


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    category: ProjectCategory | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    per_page: int = Query(default=50, ge=1),
) -> ListProjectsResponse:
    """List projects ordered by title.

    Args:
        category: Only projects in this category
        search: Case-insensitive match on title or slug
        page: 1-based page number
        per_page: Page size, capped at 100
    """
    return await list_projects_use_case.execute(
        ListProjectsRequest(
            category=category, search=search, page=page, per_page=per_page
        )
    )


@router.get("/{slug}", response_model=GetProjectResponse)
async def get_project(
    slug: str,
    get_project_use_case: FromDishka[GetProjectUseCase],
) -> GetProjectResponse:
    """Get a project with its README and comment counts."""
    return await get_project_use_case.execute(slug)


@router.patch("/{slug}", response_model=CategorizeProjectResponse)
async def categorize_project(
    slug: str,
    actor: CurrentAccount,
    body: CategorizeProjectRequest,
    categorize_project_use_case: FromDishka[CategorizeProjectUseCase],
) -> CategorizeProjectResponse:
    """Set a project's category and/or circle. Admins only.

    Example:
        PATCH /projects/libft
        {"category": "NEW_CORE", "circle": 0}

    Raises:
        UnauthenticatedError: No valid session (401)
        NotAuthorizedError: Caller is not an admin (403)
        ValidationError: Empty update or invalid circle (400)
    """
    return await categorize_project_use_case.execute(slug, body, actor)
