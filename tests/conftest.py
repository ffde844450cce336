"""Test configuration and shared factories."""

from typing import Any
from uuid import uuid4

from praxis.domain.model import Account, AuthIdentity, Project
from praxis.domain.value import (
    AccountId,
    FortyTwoIdentity,
    ProjectCategory,
    ProjectId,
    Role,
    Slug,
)
from praxis.domain.value.types import Login


def make_identity(
    intra_id: int = 4242,
    login: str = "jdoe",
    email: str | None = "jdoe@student.42.fr",
    **overrides: Any,
) -> FortyTwoIdentity:
    """42 identity as returned by ``/v2/me``."""
    fields = {
        "intra_id": intra_id,
        "login": login,
        "email": email,
        "display_name": "John Doe",
        "avatar_url": f"https://cdn.intra.42.fr/users/{login}.jpg",
        "campus": "Paris",
    }
    fields.update(overrides)
    return FortyTwoIdentity(**fields)


def make_account(
    login: str = "jdoe",
    intra_id: int | None = 4242,
    email: str | None = None,
    role: Role = Role.USER,
    **overrides: Any,
) -> Account:
    """Account with a fresh id."""
    return Account(
        id=overrides.pop("id", AccountId(uuid4())),
        intra_id=intra_id,
        login=Login(login),
        email=email if email is not None else f"{login}@student.42.fr",
        role=role,
        **overrides,
    )


def make_auth_identity(account: Account) -> AuthIdentity:
    """Identity-store entry matching an account."""
    return AuthIdentity(id=account.id, email=account.email)


def make_project(
    slug: str = "libft",
    title: str | None = None,
    forty_two_project_id: int | None = 1314,
    category: ProjectCategory = ProjectCategory.OTHER,
    circle: int | None = None,
) -> Project:
    """Catalogue project."""
    return Project(
        id=ProjectId(uuid4()),
        slug=Slug(slug),
        title=title or slug.capitalize(),
        forty_two_project_id=forty_two_project_id,
        category=category,
        circle=circle,
    )


def make_intra_user(
    login: str = "jdoe",
    intra_id: int = 4242,
    projects_users: list[dict[str, Any]] | None = None,
    achievements: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Trimmed ``/v2/users/{login}`` payload."""
    return {
        "id": intra_id,
        "login": login,
        "displayname": "John Doe",
        "first_name": "John",
        "last_name": "Doe",
        "image": {"link": f"https://cdn.intra.42.fr/users/{login}.jpg"},
        "location": "e1r2p3",
        "correction_point": 5,
        "wallet": 120,
        "pool_month": "july",
        "pool_year": "2023",
        "campus": [{"id": 1, "name": "Paris"}],
        "cursus_users": [
            {
                "cursus_id": 9,
                "level": 8.5,
                "grade": None,
                "blackholed_at": None,
                "skills": [],
            },
            {
                "cursus_id": 21,
                "level": 7.42,
                "grade": "Learner",
                "blackholed_at": "2027-01-01T00:00:00.000Z",
                "skills": [{"id": 1, "name": "Unix", "level": 5.2}],
            },
        ],
        "projects_users": projects_users if projects_users is not None else [],
        "achievements": achievements if achievements is not None else [],
    }


def make_project_user(
    project_id: int,
    slug: str,
    status: str = "finished",
    validated: bool | None = True,
    final_mark: int | None = 100,
    marked_at: str | None = "2024-01-10T10:00:00.000Z",
    updated_at: str = "2024-01-10T10:00:00.000Z",
    cursus_ids: list[int] | None = None,
) -> dict[str, Any]:
    """One ``projects_users`` entry."""
    return {
        "id": project_id * 10,
        "occurrence": 0,
        "final_mark": final_mark,
        "status": status,
        "validated?": validated,
        "marked_at": marked_at,
        "updated_at": updated_at,
        "cursus_ids": cursus_ids if cursus_ids is not None else [21],
        "project": {"id": project_id, "name": slug.capitalize(), "slug": slug},
    }
