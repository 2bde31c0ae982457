"""In-memory vote repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from topfive.domain.model import Vote
from topfive.domain.repository import VoteRepository
from topfive.domain.value import ResourceId, UserId, VoteDirection, VoteId
from topfive.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._db.votes.get(vote_id)

    async def find_by_user_and_resource(
        self, user_id: UserId, resource_id: ResourceId
    ) -> Optional[Vote]:
        """Find a user's vote on a resource."""
        for vote in self._db.votes.values():
            if vote.user_id == user_id and vote.resource_id == resource_id:
                return vote
        return None

    async def find_by_user_and_resources(
        self, user_id: UserId, resource_ids: Sequence[ResourceId]
    ) -> List[Vote]:
        """Find a user's votes on several resources."""
        wanted = set(resource_ids)
        return [
            v
            for v in self._db.votes.values()
            if v.user_id == user_id and v.resource_id in wanted
        ]

    async def find_by_resource(self, resource_id: ResourceId) -> List[Vote]:
        """Find all votes on a resource."""
        return [v for v in self._db.votes.values() if v.resource_id == resource_id]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the resource
        """
        existing = await self.find_by_user_and_resource(vote.user_id, vote.resource_id)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._db.put(self._db.votes, vote.id, vote)
        return vote

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of a vote."""
        vote = self._db.votes.get(vote_id)
        if vote is None:
            return None

        updated = vote.model_copy(
            update={"direction": direction, "updated_at": datetime.now()}
        )
        self._db.put(self._db.votes, vote_id, updated)
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        if vote_id not in self._db.votes:
            return False
        self._db.remove(self._db.votes, vote_id)
        return True
