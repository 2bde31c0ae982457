"""Counter ledger domain service."""

import logfire

from topfive.domain.error import ResourceNotFoundError
from topfive.domain.model.resource import Resource
from topfive.domain.repository import ResourceRepository
from topfive.domain.value import ResourceId, VoteDirection

from .base import Service


class CounterLedger(Service):
    """Owns the up/down vote counters stored on resources.

    Counters are a denormalised cache of the vote records. Only the vote
    coordinator calls the ledger, inside the same unit of work as the
    matching vote change. Each call adjusts exactly one counter.
    """

    def __init__(self, resource_repository: ResourceRepository) -> None:
        """Initialize counter ledger.

        Args:
            resource_repository: Resource repository
        """
        self.resource_repository = resource_repository

    async def increment(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Resource:
        """Add one vote to a resource's counter.

        Args:
            resource_id: Resource ID
            direction: Counter to increment

        Returns:
            Updated resource

        Raises:
            ResourceNotFoundError: If the resource does not exist
        """
        with logfire.span(
            "counter_ledger.increment",
            resource_id=str(resource_id),
            direction=direction.value,
        ):
            resource = await self.resource_repository.increment_votes(
                resource_id, direction
            )
            if resource is None:
                logfire.error(
                    "Counter increment on missing resource",
                    resource_id=str(resource_id),
                )
                raise ResourceNotFoundError(str(resource_id))

            logfire.debug(
                "Counter incremented",
                resource_id=str(resource_id),
                up_votes=resource.up_votes,
                down_votes=resource.down_votes,
            )
            return resource

    async def decrement(
        self, resource_id: ResourceId, direction: VoteDirection
    ) -> Resource:
        """Remove one vote from a resource's counter, never going below zero.

        Decrementing a counter that is already zero is a no-op, so a
        retraction that races another one cannot drive it negative.

        Args:
            resource_id: Resource ID
            direction: Counter to decrement

        Returns:
            Resource after the update

        Raises:
            ResourceNotFoundError: If the resource does not exist
        """
        with logfire.span(
            "counter_ledger.decrement",
            resource_id=str(resource_id),
            direction=direction.value,
        ):
            before = await self.resource_repository.find_by_id(resource_id)
            if before is None:
                logfire.error(
                    "Counter decrement on missing resource",
                    resource_id=str(resource_id),
                )
                raise ResourceNotFoundError(str(resource_id))

            if before.count_for(direction) == 0:
                logfire.warn(
                    "Counter already at zero, decrement skipped",
                    resource_id=str(resource_id),
                    direction=direction.value,
                )
                return before

            resource = await self.resource_repository.decrement_votes(
                resource_id, direction
            )
            if resource is None:
                raise ResourceNotFoundError(str(resource_id))

            logfire.debug(
                "Counter decremented",
                resource_id=str(resource_id),
                up_votes=resource.up_votes,
                down_votes=resource.down_votes,
            )
            return resource
