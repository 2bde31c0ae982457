"""Get vote use case."""

from uuid import UUID

from pydantic import BaseModel

from topfive.application.usecase.base import BaseUseCase
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import ResourceId, UserId

from .common import VoteResponse


class GetVoteRequest(BaseModel):
    """Get vote request."""

    resource_id: UUID
    user_id: str  # User ID from authenticated user


class GetVoteUseCase(BaseUseCase):
    """Use case for reading the caller's vote on a resource."""

    def __init__(self, vote_coordinator: VoteCoordinator) -> None:
        self.vote_coordinator = vote_coordinator

    async def execute(self, request: GetVoteRequest) -> VoteResponse:
        """Execute get vote flow.

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
        """
        vote = await self.vote_coordinator.get_vote(
            UserId(UUID(request.user_id)), ResourceId(request.resource_id)
        )
        return VoteResponse.from_vote(vote)
