"""Shared vote response model."""

from datetime import datetime

from pydantic import BaseModel

from topfive.domain.model import Vote


class VoteResponse(BaseModel):
    """A user's vote on a resource."""

    vote_id: str
    resource_id: str
    direction: bool  # True = up
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteResponse":
        return cls(
            vote_id=str(vote.id),
            resource_id=str(vote.resource_id),
            direction=vote.direction.as_bool,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )
