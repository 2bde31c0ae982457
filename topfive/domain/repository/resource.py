"""Resource repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from topfive.domain.model.resource import Resource
from topfive.domain.value import ResourceId, SectionId, VoteDirection


class ResourceRepository(ABC):
    """Repository for the Resource aggregate.

    Resource CRUD belongs to another part of the system; the voting core
    only reads resources and adjusts their vote counters.
    """

    @abstractmethod
    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID.

        Args:
            resource_id: The resource's unique identifier

        Returns:
            The resource if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, resource_id: ResourceId
    ) -> Optional[Resource]:
        """Find a resource by ID and lock it for the current transaction.

        Concurrent writers on the same resource wait until the
        transaction holding the lock commits or rolls back.

        Args:
            resource_id: The resource's unique identifier

        Returns:
            The resource if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_section(self, section_id: SectionId) -> List[Resource]:
        """Find every resource in a section.

        Args:
            section_id: The section's unique identifier

        Returns:
            All resources in the section, oldest first
        """
        pass

    @abstractmethod
    async def save(self, resource: Resource) -> Resource:
        """Save a resource (create or update).

        Args:
            resource: The resource to save

        Returns:
            The saved resource
        """
        pass

    @abstractmethod
    async def increment_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Atomically add one to the counter for a direction.

        Args:
            resource_id: The resource ID
            direction: Which counter to increment

        Returns:
            The updated resource, or None if it does not exist
        """
        pass

    @abstractmethod
    async def decrement_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Atomically subtract one from the counter for a direction.

        A counter that is already zero is left unchanged.

        Args:
            resource_id: The resource ID
            direction: Which counter to decrement

        Returns:
            The resource after the update, or None if it does not exist
        """
        pass
