"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from topfive.application.usecase.base import BaseUseCase
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import ResourceId, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    resource_id: UUID
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str
    resource_id: str


class RemoveVoteUseCase(BaseUseCase):
    """Use case for retracting a vote."""

    def __init__(self, vote_coordinator: VoteCoordinator) -> None:
        """Initialize remove vote use case.

        Args:
            vote_coordinator: Vote coordinator domain service
        """
        self.vote_coordinator = vote_coordinator

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
            PersistenceFailureError: If the removal could not be committed
        """
        removed = await self.vote_coordinator.remove_vote(
            user_id=UserId(UUID(request.user_id)),
            resource_id=ResourceId(request.resource_id),
        )
        return RemoveVoteResponse(
            success=True,
            message="Vote removed successfully",
            resource_id=str(removed.resource_id),
        )
