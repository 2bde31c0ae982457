"""In-memory section repository for testing."""

from typing import Optional

from topfive.domain.model import Section
from topfive.domain.repository import SectionRepository
from topfive.domain.value import SectionId, SectionName
from topfive.persistence.repository.inmemory.database import InMemoryDatabase


class InMemorySectionRepository(SectionRepository):
    """In-memory implementation of SectionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, section_id: SectionId) -> Optional[Section]:
        """Find a section by ID."""
        return self._db.sections.get(section_id)

    async def find_by_name(self, name: SectionName) -> Optional[Section]:
        """Find a section by name."""
        for section in self._db.sections.values():
            if section.name == name:
                return section
        return None

    async def save(self, section: Section) -> Section:
        """Save a section."""
        self._db.put(self._db.sections, section.id, section)
        return section
