"""Vote store domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from topfive.domain.error import VoteConflictError, VoteNotFoundError
from topfive.domain.model.vote import Vote
from topfive.domain.repository import VoteRepository
from topfive.domain.value import ResourceId, UserId, VoteDirection, VoteId

from .base import Service


class VoteStore(Service):
    """Owns the individual vote records, one per (user, resource).

    Write methods are called by the vote coordinator only; it wraps them
    in a unit of work together with the matching counter update.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote store.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def find(self, user_id: UserId, resource_id: ResourceId) -> Vote | None:
        """Find a user's vote on a resource.

        Args:
            user_id: Voting user
            resource_id: Resource voted on

        Returns:
            The vote, or None if the user has not voted
        """
        return await self.vote_repository.find_by_user_and_resource(
            user_id, resource_id
        )

    async def get(self, user_id: UserId, resource_id: ResourceId) -> Vote:
        """Get a user's vote on a resource.

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
        """
        vote = await self.find(user_id, resource_id)
        if vote is None:
            raise VoteNotFoundError(str(user_id), str(resource_id))
        return vote

    async def find_for_resources(
        self, user_id: UserId, resource_ids: list[ResourceId]
    ) -> dict[ResourceId, VoteDirection]:
        """Look up a user's votes on several resources at once.

        Args:
            user_id: Voting user
            resource_ids: Resources to check

        Returns:
            Mapping of resource ID to vote direction, for voted resources only
        """
        if not resource_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_user_and_resources(
            user_id, resource_ids
        )
        return {vote.resource_id: vote.direction for vote in votes}

    async def insert(
        self, user_id: UserId, resource_id: ResourceId, direction: VoteDirection
    ) -> Vote:
        """Record a new vote.

        Args:
            user_id: Voting user
            resource_id: Resource voted on
            direction: Vote direction

        Returns:
            Created vote

        Raises:
            VoteConflictError: If the user already has a vote on the resource
        """
        now = datetime.now()
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            resource_id=resource_id,
            direction=direction,
            created_at=now,
            updated_at=now,
        )

        try:
            saved = await self.vote_repository.save(vote)
        except IntegrityError:
            logfire.warn(
                "Duplicate vote attempt",
                user_id=str(user_id),
                resource_id=str(resource_id),
            )
            raise VoteConflictError(str(user_id), str(resource_id))

        logfire.info(
            "Vote recorded",
            vote_id=str(saved.id),
            resource_id=str(resource_id),
            direction=direction.value,
        )
        return saved

    async def change_direction(self, vote: Vote, direction: VoteDirection) -> Vote:
        """Flip an existing vote to a new direction.

        Raises:
            VoteNotFoundError: If the vote was deleted meanwhile
        """
        updated = await self.vote_repository.update_direction(vote.id, direction)
        if updated is None:
            raise VoteNotFoundError(str(vote.user_id), str(vote.resource_id))

        logfire.info(
            "Vote direction changed",
            vote_id=str(vote.id),
            old=vote.direction.value,
            new=direction.value,
        )
        return updated

    async def delete(self, vote: Vote) -> None:
        """Delete a vote.

        Raises:
            VoteNotFoundError: If the vote was deleted meanwhile
        """
        deleted = await self.vote_repository.delete(vote.id)
        if not deleted:
            raise VoteNotFoundError(str(vote.user_id), str(vote.resource_id))

        logfire.info(
            "Vote deleted", vote_id=str(vote.id), resource_id=str(vote.resource_id)
        )
