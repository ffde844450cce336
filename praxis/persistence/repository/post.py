"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Post
from praxis.domain.repository import PostRepository
from praxis.domain.value import AccountId, PostId, ProjectId
from praxis.persistence.mappers import post_to_dict, row_to_post
from praxis.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_by_project(self, project_id: ProjectId) -> list[Post]:
        stmt = (
            select(posts_table)
            .where(posts_table.c.project_id == project_id)
            .order_by(posts_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_by_author_and_project(
        self, author_id: AccountId, project_id: ProjectId
    ) -> Optional[Post]:
        stmt = select(posts_table).where(
            and_(
                posts_table.c.author_id == author_id,
                posts_table.c.project_id == project_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def count_by_project(self, project_id: ProjectId) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.project_id == project_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, post: Post) -> Post:
        """Insert or update a post.

        Raises:
            IntegrityError: If the author already has a post on the project
        """
        data = post_to_dict(post)
        async with self.session.begin_nested():
            existing = await self.find_by_id(post.id)
            if existing:
                await self.session.execute(
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(
                        title=post.title,
                        content=post.content,
                        updated_at=post.updated_at,
                    )
                )
            else:
                await self.session.execute(insert(posts_table).values(**data))
        return post

    async def delete(self, post_id: PostId) -> None:
        await self.session.execute(delete(posts_table).where(posts_table.c.id == post_id))
        await self.session.flush()
