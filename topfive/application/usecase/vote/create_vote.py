"""Create vote use case."""

from uuid import UUID

from pydantic import BaseModel

from topfive.application.usecase.base import BaseUseCase
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import ResourceId, UserId, VoteDirection

from .common import VoteResponse


class CreateVoteRequest(BaseModel):
    """Create vote request."""

    resource_id: UUID
    direction: bool  # True = up, False = down
    user_id: str  # User ID from authenticated user


class CreateVoteUseCase(BaseUseCase):
    """Use case for casting a first vote on a resource."""

    def __init__(self, vote_coordinator: VoteCoordinator) -> None:
        """Initialize create vote use case.

        Args:
            vote_coordinator: Vote coordinator domain service
        """
        self.vote_coordinator = vote_coordinator

    async def execute(self, request: CreateVoteRequest) -> VoteResponse:
        """Execute create vote flow.

        Args:
            request: Create vote request

        Returns:
            The created vote

        Raises:
            ResourceNotFoundError: If the resource does not exist
            VoteConflictError: If the user already voted on the resource
            PersistenceFailureError: If the vote could not be committed
        """
        vote = await self.vote_coordinator.create_vote(
            user_id=UserId(UUID(request.user_id)),
            resource_id=ResourceId(request.resource_id),
            direction=VoteDirection.from_bool(request.direction),
        )
        return VoteResponse.from_vote(vote)
