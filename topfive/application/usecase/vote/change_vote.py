"""Change vote use case."""

from uuid import UUID

from pydantic import BaseModel

from topfive.application.usecase.base import BaseUseCase
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import ResourceId, UserId, VoteDirection

from .common import VoteResponse


class ChangeVoteRequest(BaseModel):
    """Change vote request."""

    resource_id: UUID
    direction: bool  # True = up, False = down
    user_id: str  # User ID from authenticated user


class ChangeVoteUseCase(BaseUseCase):
    """Use case for flipping the direction of an existing vote."""

    def __init__(self, vote_coordinator: VoteCoordinator) -> None:
        self.vote_coordinator = vote_coordinator

    async def execute(self, request: ChangeVoteRequest) -> VoteResponse:
        """Execute change vote flow.

        Raises:
            VoteNotFoundError: If the user has not voted on the resource
            PersistenceFailureError: If the change could not be committed
        """
        vote = await self.vote_coordinator.change_vote(
            user_id=UserId(UUID(request.user_id)),
            resource_id=ResourceId(request.resource_id),
            direction=VoteDirection.from_bool(request.direction),
        )
        return VoteResponse.from_vote(vote)
