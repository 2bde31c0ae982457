"""PostgreSQL implementation of Section repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from topfive.domain.model import Section
from topfive.domain.repository import SectionRepository
from topfive.domain.value import SectionId, SectionName
from topfive.persistence.mappers import row_to_section, section_to_dict
from topfive.persistence.tables import sections_table


class PostgresSectionRepository(SectionRepository):
    """PostgreSQL implementation of SectionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, section_id: SectionId) -> Optional[Section]:
        """Find a section by ID."""
        stmt = select(sections_table).where(sections_table.c.id == section_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_section(row._asdict()) if row else None

    async def find_by_name(self, name: SectionName) -> Optional[Section]:
        """Find a section by name."""
        stmt = select(sections_table).where(sections_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_section(row._asdict()) if row else None

    async def save(self, section: Section) -> Section:
        """Save a section (create or update)."""
        section_dict = section_to_dict(section)
        existing = await self.find_by_id(section.id)

        if existing:
            stmt = (
                update(sections_table)
                .where(sections_table.c.id == section.id)
                .values(**section_dict)
            )
        else:
            stmt = insert(sections_table).values(**section_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return section
