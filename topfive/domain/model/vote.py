"""Vote entity.

Each user casts at most one vote per resource, either up or down.
The direction may be flipped in place; retracting deletes the vote.
"""

from datetime import datetime

from pydantic import Field

from topfive.domain.model.common import DomainModel
from topfive.domain.value import ResourceId, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per resource (enforced by the unique_vote constraint)
    - Only the voting user may change or remove it
    """

    id: VoteId
    user_id: UserId
    resource_id: ResourceId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_up(self) -> bool:
        """Whether this is an upvote."""
        return self.direction is VoteDirection.UP
