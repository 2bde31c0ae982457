"""In-memory resource repository for testing."""

from typing import List, Optional

from topfive.domain.model import Resource
from topfive.domain.repository import ResourceRepository
from topfive.domain.value import ResourceId, SectionId, VoteDirection
from topfive.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryResourceRepository(ResourceRepository):
    """In-memory implementation of ResourceRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by ID."""
        return self._db.resources.get(resource_id)

    async def find_by_id_for_update(
        self, resource_id: ResourceId
    ) -> Optional[Resource]:
        """Find a resource by ID (row locks are a no-op in memory)."""
        return self._db.resources.get(resource_id)

    async def find_by_section(self, section_id: SectionId) -> List[Resource]:
        """Find every resource in a section."""
        resources = [
            r for r in self._db.resources.values() if r.section_id == section_id
        ]
        return sorted(resources, key=lambda r: r.created_at)

    async def save(self, resource: Resource) -> Resource:
        """Save a resource."""
        self._db.put(self._db.resources, resource.id, resource)
        return resource

    async def increment_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Increment a counter by 1."""
        resource = self._db.resources.get(resource_id)
        if resource is None:
            return None

        field = "up_votes" if direction is VoteDirection.UP else "down_votes"
        updated = resource.model_copy(
            update={field: resource.count_for(direction) + 1}
        )
        self._db.put(self._db.resources, resource_id, updated)
        return updated

    async def decrement_votes(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Optional[Resource]:
        """Decrement a counter by 1 (minimum 0)."""
        resource = self._db.resources.get(resource_id)
        if resource is None:
            return None
        if resource.count_for(direction) == 0:
            return resource

        field = "up_votes" if direction is VoteDirection.UP else "down_votes"
        updated = resource.model_copy(
            update={field: resource.count_for(direction) - 1}
        )
        self._db.put(self._db.resources, resource_id, updated)
        return updated
