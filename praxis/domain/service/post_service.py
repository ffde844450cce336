"""Post (README) domain service."""

from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from praxis.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from praxis.domain.model import Post
from praxis.domain.model.common import utcnow
from praxis.domain.model.post import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from praxis.domain.repository import PostRepository
from praxis.domain.value import AccountId, PostId, ProjectId

from .base import Service


def _clean_title(title: str) -> str:
    title = title.strip()
    if not title:
        raise ValidationError("Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title is too long (max {TITLE_MAX_LENGTH} characters)")
    return title


def _clean_content(content: str) -> str:
    if not content.strip():
        raise ValidationError("Content is required")
    if len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Content is too long (max {CONTENT_MAX_LENGTH} characters)"
        )
    return content


class PostService(Service):
    """Domain service for README operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_posts_for_project(self, project_id: ProjectId) -> list[Post]:
        """Get every README of a project."""
        with logfire.span(
            "post_service.get_posts_for_project", project_id=str(project_id)
        ):
            return await self.post_repository.find_by_project(project_id)

    async def count_for_project(self, project_id: ProjectId) -> int:
        """Count READMEs on a project."""
        return await self.post_repository.count_by_project(project_id)

    async def create_post(
        self,
        project_id: ProjectId,
        author_id: AccountId,
        title: str,
        content: str,
    ) -> Post:
        """Publish a README. Authors get one per project.

        Raises:
            ValidationError: If title or content is missing or too long
            ConflictError: If the author already has a README for the project
        """
        with logfire.span(
            "post_service.create_post",
            project_id=str(project_id),
            author_id=str(author_id),
        ):
            title = _clean_title(title)
            content = _clean_content(content)

            existing = await self.post_repository.find_by_author_and_project(
                author_id, project_id
            )
            if existing:
                logfire.warn(
                    "Duplicate README attempt",
                    author_id=str(author_id),
                    existing_post_id=str(existing.id),
                )
                raise ConflictError(
                    "You have already written a README for this project",
                    existing_id=str(existing.id),
                )

            post = Post(
                id=PostId(uuid4()),
                project_id=project_id,
                author_id=author_id,
                title=title,
                content=content,
            )
            try:
                saved = await self.post_repository.save(post)
            except IntegrityError:
                raise ConflictError(
                    "You have already written a README for this project"
                )

            logfire.info("README created", post_id=str(saved.id))
            return saved

    async def get_owned_post(
        self, post_id: PostId, project_id: ProjectId, user_id: AccountId
    ) -> Post:
        """Load a post the user may modify.

        Raises:
            NotFoundError: If the post does not exist
            ValidationError: If the post belongs to another project
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post:
            raise NotFoundError("Post", str(post_id))
        if post.project_id != project_id:
            raise ValidationError("Post does not belong to this project")
        if post.author_id != user_id:
            logfire.warn(
                "Unauthorized README modification",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    async def update_post(
        self,
        post: Post,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Post:
        """Update title and/or content of an owned post.

        Raises:
            ValidationError: If nothing is updated or a field is invalid
        """
        if title is None and content is None:
            raise ValidationError("Nothing to update")

        update: dict = {"updated_at": utcnow()}
        if title is not None:
            update["title"] = _clean_title(title)
        if content is not None:
            update["content"] = _clean_content(content)

        with logfire.span("post_service.update_post", post_id=str(post.id)):
            return await self.post_repository.save(post.model_copy(update=update))

    async def delete_post(self, post: Post) -> None:
        """Delete an owned post."""
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            await self.post_repository.delete(post.id)
            logfire.info("README deleted", post_id=str(post.id))
