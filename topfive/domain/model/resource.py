"""Resource aggregate.

A resource is a link posted to a section. It carries the denormalised
up/down vote counters maintained by the counter ledger.
"""

from datetime import datetime

from pydantic import Field, computed_field

from topfive.domain.model.common import DomainModel
from topfive.domain.value import Handle, ResourceId, SectionId, UserId, VoteDirection


class Resource(DomainModel):
    """Resource aggregate root.

    Business rules:
    - up_votes / down_votes never go below zero
    - counters equal the number of up / down votes on the resource once
      every vote operation has completed
    """

    id: ResourceId
    section_id: SectionId
    name: str = Field(min_length=1, max_length=300)
    url: str = Field(min_length=1)
    owner_id: UserId
    owner_handle: Handle
    up_votes: int = Field(default=0, ge=0)
    down_votes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def total_votes(self) -> int:
        """Total number of votes cast on this resource."""
        return self.up_votes + self.down_votes

    def count_for(self, direction: VoteDirection) -> int:
        """Current counter value for a direction."""
        if direction is VoteDirection.UP:
            return self.up_votes
        return self.down_votes
