"""Vote coordinator domain service.

Every vote write is one atomic unit covering the vote record and the
resource counters:

    NoVote    --create(dir)-->  Upvoted / Downvoted
    Upvoted   --change(down)--> Downvoted   (and back)
    Upvoted   --remove-->       NoVote      (same for Downvoted)

Each unit holds the resource's lock, validates before mutating, and
commits the vote and counter writes together or rolls both back.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from topfive.config import VotingSettings
from topfive.domain.error import (
    OperationTimeoutError,
    PersistenceFailureError,
    ResourceNotFoundError,
    VoteConflictError,
    VoteNotFoundError,
)
from topfive.domain.model.vote import Vote
from topfive.domain.repository import ResourceRepository, UnitOfWork
from topfive.domain.value import ResourceId, UserId, VoteDirection

from .base import Service
from .counter_ledger import CounterLedger
from .locks import ResourceLockRegistry
from .vote_store import VoteStore


class VoteCoordinator(Service):
    """Single entry point for creating, changing and removing votes.

    The user ID always comes from the authenticated caller, so a user can
    only ever reach their own vote.
    """

    def __init__(
        self,
        vote_store: VoteStore,
        counter_ledger: CounterLedger,
        resource_repository: ResourceRepository,
        unit_of_work: UnitOfWork,
        lock_registry: ResourceLockRegistry,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote coordinator.

        Args:
            vote_store: Vote record store
            counter_ledger: Resource counter ledger
            resource_repository: Resource repository (existence checks)
            unit_of_work: Transaction boundary shared with the repositories
            lock_registry: Application-wide per-resource locks
            voting_settings: Timeout configuration
        """
        self.vote_store = vote_store
        self.counter_ledger = counter_ledger
        self.resource_repository = resource_repository
        self.unit_of_work = unit_of_work
        self.lock_registry = lock_registry
        self.voting_settings = voting_settings

    @asynccontextmanager
    async def _atomic(
        self, operation: str, resource_id: ResourceId, timeout: float | None
    ) -> AsyncIterator[None]:
        """Run the block under the resource lock inside one unit of work.

        Raises:
            OperationTimeoutError: If lock wait plus work exceeds the budget
            PersistenceFailureError: If storage fails; nothing is applied
        """
        budget = self.voting_settings.operation_timeout if timeout is None else timeout

        try:
            async with asyncio.timeout(budget):
                async with self.lock_registry.hold(resource_id):
                    async with self.unit_of_work:
                        yield
        except TimeoutError:
            logfire.error(
                "Vote operation timed out and was rolled back",
                operation=operation,
                resource_id=str(resource_id),
                timeout=budget,
            )
            raise OperationTimeoutError(operation, budget)
        except SQLAlchemyError as e:
            logfire.error(
                "Vote operation failed in storage and was rolled back",
                operation=operation,
                resource_id=str(resource_id),
                error=str(e),
            )
            raise PersistenceFailureError(f"{operation} failed: {e}") from e

    async def get_vote(self, user_id: UserId, resource_id: ResourceId) -> Vote:
        """Get the caller's vote on a resource.

        Args:
            user_id: Authenticated user
            resource_id: Resource ID

        Returns:
            The vote

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
        """
        with logfire.span(
            "vote_coordinator.get_vote",
            user_id=str(user_id),
            resource_id=str(resource_id),
        ):
            return await self.vote_store.get(user_id, resource_id)

    async def create_vote(
        self,
        user_id: UserId,
        resource_id: ResourceId,
        direction: VoteDirection,
        timeout: float | None = None,
    ) -> Vote:
        """Cast a first vote on a resource.

        Args:
            user_id: Authenticated user
            resource_id: Resource to vote on
            direction: Up or down
            timeout: Seconds before the operation is abandoned and rolled back

        Returns:
            Created vote

        Raises:
            ResourceNotFoundError: If the resource does not exist
            VoteConflictError: If the user already voted on the resource
            PersistenceFailureError: If the commit fails or times out
        """
        with logfire.span(
            "vote_coordinator.create_vote",
            user_id=str(user_id),
            resource_id=str(resource_id),
            direction=direction.value,
        ):
            async with self._atomic("create_vote", resource_id, timeout):
                resource = await self.resource_repository.find_by_id_for_update(
                    resource_id
                )
                if resource is None:
                    logfire.warn(
                        "Vote on non-existent resource", resource_id=str(resource_id)
                    )
                    raise ResourceNotFoundError(str(resource_id))

                existing = await self.vote_store.find(user_id, resource_id)
                if existing is not None:
                    logfire.warn(
                        "Vote already exists",
                        user_id=str(user_id),
                        resource_id=str(resource_id),
                    )
                    raise VoteConflictError(str(user_id), str(resource_id))

                vote = await self.vote_store.insert(user_id, resource_id, direction)
                await self.counter_ledger.increment(resource_id, direction)

            return vote

    async def change_vote(
        self,
        user_id: UserId,
        resource_id: ResourceId,
        direction: VoteDirection,
        timeout: float | None = None,
    ) -> Vote:
        """Change the direction of the caller's vote.

        Changing to the current direction leaves the vote and the counters
        untouched.

        Args:
            user_id: Authenticated user
            resource_id: Resource voted on
            direction: New direction
            timeout: Seconds before the operation is abandoned and rolled back

        Returns:
            The vote after the change

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
            PersistenceFailureError: If the commit fails or times out
        """
        with logfire.span(
            "vote_coordinator.change_vote",
            user_id=str(user_id),
            resource_id=str(resource_id),
            direction=direction.value,
        ):
            async with self._atomic("change_vote", resource_id, timeout):
                await self.resource_repository.find_by_id_for_update(resource_id)

                existing = await self.vote_store.find(user_id, resource_id)
                if existing is None:
                    logfire.warn(
                        "No vote to change",
                        user_id=str(user_id),
                        resource_id=str(resource_id),
                    )
                    raise VoteNotFoundError(str(user_id), str(resource_id))

                if existing.direction is direction:
                    logfire.info(
                        "Vote direction unchanged", vote_id=str(existing.id)
                    )
                    return existing

                await self.counter_ledger.decrement(resource_id, existing.direction)
                await self.counter_ledger.increment(resource_id, direction)
                vote = await self.vote_store.change_direction(existing, direction)

            return vote

    async def remove_vote(
        self,
        user_id: UserId,
        resource_id: ResourceId,
        timeout: float | None = None,
    ) -> Vote:
        """Retract the caller's vote.

        Args:
            user_id: Authenticated user
            resource_id: Resource voted on
            timeout: Seconds before the operation is abandoned and rolled back

        Returns:
            The vote that was removed

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
            PersistenceFailureError: If the commit fails or times out
        """
        with logfire.span(
            "vote_coordinator.remove_vote",
            user_id=str(user_id),
            resource_id=str(resource_id),
        ):
            async with self._atomic("remove_vote", resource_id, timeout):
                await self.resource_repository.find_by_id_for_update(resource_id)

                existing = await self.vote_store.find(user_id, resource_id)
                if existing is None:
                    logfire.info(
                        "No vote to remove",
                        user_id=str(user_id),
                        resource_id=str(resource_id),
                    )
                    raise VoteNotFoundError(str(user_id), str(resource_id))

                await self.counter_ledger.decrement(resource_id, existing.direction)
                await self.vote_store.delete(existing)

            return existing
