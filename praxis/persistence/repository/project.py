"""PostgreSQL implementation of Project repository."""

from typing import Optional, Sequence

from sqlalchemy import func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from praxis.domain.model import Project
from praxis.domain.repository import ProjectRepository
from praxis.domain.value import ProjectCategory, ProjectId
from praxis.persistence.mappers import project_to_dict, row_to_project
from praxis.persistence.tables import projects_table


def _filters(category: Optional[ProjectCategory], search: Optional[str]) -> list:
    criteria = []
    if category is not None:
        criteria.append(projects_table.c.category == category.value)
    if search:
        pattern = f"%{search}%"
        criteria.append(
            or_(
                projects_table.c.title.ilike(pattern),
                projects_table.c.slug.ilike(pattern),
            )
        )
    return criteria


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_by_slug(self, slug: str) -> Optional[Project]:
        stmt = select(projects_table).where(projects_table.c.slug == slug)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_project(dict(row)) if row else None

    async def find_all(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 50,
    ) -> list[Project]:
        stmt = (
            select(projects_table)
            .where(*_filters(category, search))
            .order_by(projects_table.c.title, projects_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_project(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        category: Optional[ProjectCategory] = None,
        search: Optional[str] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(projects_table)
            .where(*_filters(category, search))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_forty_two_ids(self, forty_two_ids: Sequence[int]) -> set[int]:
        if not forty_two_ids:
            return set()
        stmt = select(projects_table.c.forty_two_project_id).where(
            projects_table.c.forty_two_project_id.in_(forty_two_ids)
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def save(self, project: Project) -> Project:
        """Insert or update a project.

        Raises:
            IntegrityError: If the slug or 42 id belongs to another project
        """
        data = project_to_dict(project)
        async with self.session.begin_nested():
            existing = await self.find_by_id(project.id)
            if existing:
                data.pop("id")
                data.pop("created_at")
                await self.session.execute(
                    update(projects_table)
                    .where(projects_table.c.id == project.id)
                    .values(**data)
                )
            else:
                await self.session.execute(insert(projects_table).values(**data))
        return project
