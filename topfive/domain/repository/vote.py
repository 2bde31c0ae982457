"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from topfive.domain.model.vote import Vote
from topfive.domain.value import ResourceId, UserId, VoteDirection, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_resource(
        self, user_id: UserId, resource_id: ResourceId
    ) -> Optional[Vote]:
        """Find a user's vote on a resource.

        Args:
            user_id: The user's ID
            resource_id: The resource's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_resources(
        self, user_id: UserId, resource_ids: Sequence[ResourceId]
    ) -> List[Vote]:
        """Find a user's votes on several resources (batch query).

        Args:
            user_id: The user's ID
            resource_ids: Resource IDs to check

        Returns:
            The user's votes on the given resources
        """
        pass

    @abstractmethod
    async def find_by_resource(self, resource_id: ResourceId) -> List[Vote]:
        """Find all votes on a resource.

        Args:
            resource_id: The resource's ID

        Returns:
            List of votes on the resource
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on the resource
        """
        pass

    @abstractmethod
    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of an existing vote.

        Args:
            vote_id: The vote to update
            direction: New direction

        Returns:
            The updated vote, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it did not exist
        """
        pass
