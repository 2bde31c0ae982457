"""Domain value objects for Top Five."""

from topfive.domain.value.identifiers import (
    ResourceId,
    SectionId,
    UserId,
    VoteId,
)
from topfive.domain.value.types import (
    Handle,
    RankingStrategy,
    SectionName,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "SectionId",
    "ResourceId",
    "VoteId",
    # Types
    "Handle",
    "RankingStrategy",
    "SectionName",
    "VoteDirection",
]
