"""Get top resources use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field, ValidationError

from topfive.application.usecase.base import BaseUseCase
from topfive.domain.service import RankingService, VoteStore
from topfive.domain.value import Handle, RankingStrategy, SectionName, UserId


class TopResourceItem(BaseModel):
    """Ranked resource in response."""

    id: str
    name: str
    url: str
    up_votes: int
    down_votes: int
    total_votes: int
    score: float
    owner: Handle
    user_vote: bool | None = None  # Caller's direction (True = up), if any


class GetTopResourcesRequest(BaseModel):
    """Get top resources request."""

    section: str
    n: int = Field(default=5, ge=1)
    strategy: RankingStrategy = RankingStrategy.CONFIDENCE
    user_id: str | None = None  # Current user ID (if authenticated)


class GetTopResourcesResponse(BaseModel):
    """Get top resources response."""

    section: str
    strategy: RankingStrategy
    resources: list[TopResourceItem]


class GetTopResourcesUseCase(BaseUseCase):
    """Use case for listing the best resources of a section."""

    def __init__(self, ranking_service: RankingService, vote_store: VoteStore) -> None:
        """Initialize get top resources use case.

        Args:
            ranking_service: Ranking domain service
            vote_store: Vote store (caller's votes on the listed resources)
        """
        self.ranking_service = ranking_service
        self.vote_store = vote_store

    async def execute(self, request: GetTopResourcesRequest) -> GetTopResourcesResponse:
        """Execute get top resources flow.

        Unknown sections yield an empty list rather than an error.

        Args:
            request: Section, size and strategy of the listing

        Returns:
            Resources ordered best first
        """
        with logfire.span(
            "get_top_resources.execute",
            section=request.section,
            n=request.n,
            strategy=request.strategy.value,
        ):
            try:
                section_name = SectionName(request.section)
            except ValidationError:
                # No section can carry this name
                logfire.info("Invalid section name {section}", section=request.section)
                return GetTopResourcesResponse(
                    section=request.section, strategy=request.strategy, resources=[]
                )

            ranked = await self.ranking_service.top_n_by_section_name(
                section_name, request.n, request.strategy
            )

            # Batch query to avoid N+1 lookups
            user_votes = {}
            if request.user_id and ranked:
                user_votes = await self.vote_store.find_for_resources(
                    UserId(UUID(request.user_id)),
                    [entry.resource.id for entry in ranked],
                )

            items = []
            for entry in ranked:
                resource = entry.resource
                direction = user_votes.get(resource.id)
                items.append(
                    TopResourceItem(
                        id=str(resource.id),
                        name=resource.name,
                        url=resource.url,
                        up_votes=resource.up_votes,
                        down_votes=resource.down_votes,
                        total_votes=resource.total_votes,
                        score=entry.score,
                        owner=resource.owner_handle,
                        user_vote=direction.as_bool if direction else None,
                    )
                )

            return GetTopResourcesResponse(
                section=request.section,
                strategy=request.strategy,
                resources=items,
            )
