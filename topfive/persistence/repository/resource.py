"""PostgreSQL implementation of Resource repository."""

from typing import List, Optional

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from topfive.domain.model import Resource
from topfive.domain.repository import ResourceRepository
from topfive.domain.value import ResourceId, SectionId, VoteDirection
from topfive.persistence.mappers import resource_to_dict, row_to_resource
from topfive.persistence.tables import resources_table


def _counter_column(direction: VoteDirection):
    if direction is VoteDirection.UP:
        return resources_table.c.up_votes
    return resources_table.c.down_votes


class PostgresResourceRepository(ResourceRepository):
    """PostgreSQL implementation of ResourceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID."""
        stmt = select(resources_table).where(resources_table.c.id == resource_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_resource(row._asdict()) if row else None

    async def find_by_id_for_update(
        self, resource_id: ResourceId
    ) -> Optional[Resource]:
        """Find a resource by ID, holding its row lock until the transaction ends."""
        stmt = (
            select(resources_table)
            .where(resources_table.c.id == resource_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_resource(row._asdict()) if row else None

    async def find_by_section(self, section_id: SectionId) -> List[Resource]:
        """Find every resource in a section."""
        with logfire.span(
            "resource_repository.find_by_section", section_id=str(section_id)
        ):
            stmt = (
                select(resources_table)
                .where(resources_table.c.section_id == section_id)
                .order_by(resources_table.c.created_at, resources_table.c.id)
            )
            result = await self.session.execute(stmt)
            resources = [row_to_resource(row._asdict()) for row in result.fetchall()]
            logfire.info("Found resources", count=len(resources))
            return resources

    async def save(self, resource: Resource) -> Resource:
        """Save a resource (create or update)."""
        resource_dict = resource_to_dict(resource)
        existing = await self.find_by_id(resource.id)

        if existing:
            stmt = (
                update(resources_table)
                .where(resources_table.c.id == resource.id)
                .values(**resource_dict)
            )
        else:
            stmt = insert(resources_table).values(**resource_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return resource

    async def increment_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Atomically increment a counter by 1.

        Uses SQL-level increment to avoid race conditions.
        """
        column = _counter_column(direction)
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == resource_id)
            .values({column: column + 1})
            .returning(*resources_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_resource(row._asdict()) if row else None

    async def decrement_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Atomically decrement a counter by 1 (minimum 0).

        Uses SQL-level decrement to avoid race conditions.
        """
        column = _counter_column(direction)
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == resource_id, column > 0)
            .values({column: column - 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(resource_id)
