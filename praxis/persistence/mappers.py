"""Mappers for converting between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand instead
of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from praxis.domain.model import Account, AuthIdentity, Comment, Post, Project, Vote
from praxis.domain.value import (
    AccountId,
    CommentId,
    PostId,
    ProjectCategory,
    ProjectId,
    Role,
    Slug,
    TargetType,
    VoteId,
)
from praxis.domain.value.types import Login


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model."""
    return Account(
        id=AccountId(_uuid(row["id"])),
        intra_id=row.get("intra_id"),
        login=Login(row["login"]),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        campus=row.get("campus"),
        role=Role(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    data = account.model_dump()
    data["login"] = account.login.root
    data["role"] = account.role.value
    return data


def row_to_auth_identity(row: Dict[str, Any]) -> AuthIdentity:
    return AuthIdentity(
        id=AccountId(_uuid(row["id"])),
        email=row["email"],
        created_at=row["created_at"],
    )


def auth_identity_to_dict(identity: AuthIdentity) -> Dict[str, Any]:
    return identity.model_dump()


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model."""
    return Project(
        id=ProjectId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row.get("description"),
        forty_two_project_id=row.get("forty_two_project_id"),
        category=ProjectCategory(row["category"]),
        circle=row.get("circle"),
        created_at=row["created_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict."""
    data = project.model_dump()
    data["slug"] = project.slug.root
    data["category"] = project.category.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    return Post(
        id=PostId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        author_id=AccountId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        project_id=ProjectId(_uuid(row["project_id"])),
        author_id=AccountId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=AccountId(_uuid(row["user_id"])),
        target_type=TargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        value=row["value"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    return data
