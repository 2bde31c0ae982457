"""Section repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from topfive.domain.model.section import Section
from topfive.domain.value import SectionId, SectionName


class SectionRepository(ABC):
    """Repository for Section entity (read side used by rankings)."""

    @abstractmethod
    async def find_by_id(self, section_id: SectionId) -> Optional[Section]:
        """Find a section by ID.

        Args:
            section_id: The section's unique identifier

        Returns:
            The section if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: SectionName) -> Optional[Section]:
        """Find a section by its unique name.

        Args:
            name: Section name

        Returns:
            The section if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, section: Section) -> Section:
        """Save a section (create or update).

        Args:
            section: The section to save

        Returns:
            The saved section
        """
        pass
