"""Per-resource mutual exclusion for vote writes."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from topfive.domain.value import ResourceId


class ResourceLockRegistry:
    """Hands out one asyncio lock per resource.

    Writes to different resources never wait on each other. A lock is
    dropped once nobody holds or waits for it, so the registry only grows
    with the number of resources being written concurrently.

    One registry is shared by the whole application (APP scope).
    """

    def __init__(self) -> None:
        self._locks: dict[ResourceId, asyncio.Lock] = {}
        self._holders: dict[ResourceId, int] = {}

    @asynccontextmanager
    async def hold(self, resource_id: ResourceId) -> AsyncIterator[None]:
        """Hold the lock for a resource for the duration of the block.

        Args:
            resource_id: Resource to serialise writes on
        """
        lock = self._locks.setdefault(resource_id, asyncio.Lock())
        self._holders[resource_id] = self._holders.get(resource_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[resource_id] -= 1
            if self._holders[resource_id] == 0:
                del self._holders[resource_id]
                del self._locks[resource_id]

    def is_locked(self, resource_id: ResourceId) -> bool:
        """Whether a write on the resource is currently in progress."""
        lock = self._locks.get(resource_id)
        return lock is not None and lock.locked()
