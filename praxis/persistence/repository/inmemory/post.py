"""In-memory post repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from praxis.domain.model import Post
from praxis.domain.repository import PostRepository
from praxis.domain.value import AccountId, PostId, ProjectId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_by_project(self, project_id: ProjectId) -> list[Post]:
        posts = [p for p in self._posts.values() if p.project_id == project_id]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def find_by_author_and_project(
        self, author_id: AccountId, project_id: ProjectId
    ) -> Optional[Post]:
        for post in self._posts.values():
            if post.author_id == author_id and post.project_id == project_id:
                return post
        return None

    async def count_by_project(self, project_id: ProjectId) -> int:
        return len(await self.find_by_project(project_id))

    async def save(self, post: Post) -> Post:
        """Save a post.

        Raises:
            IntegrityError: If the author already has a post on the project
        """
        existing = await self.find_by_author_and_project(post.author_id, post.project_id)
        if existing and existing.id != post.id:
            raise IntegrityError("Duplicate post", None, Exception())
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        self._posts.pop(post_id, None)
