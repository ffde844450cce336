"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Comment
from praxis.domain.repository import CommentRepository
from praxis.domain.value import CommentId, ProjectId
from praxis.persistence.mappers import comment_to_dict, row_to_comment
from praxis.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_project(self, project_id: ProjectId) -> list[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.project_id == project_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_project(self, project_id: ProjectId) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.project_id == project_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
