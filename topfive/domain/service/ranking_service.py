"""Ranking domain service (read path for top-N listings)."""

from dataclasses import dataclass

import logfire

from topfive.domain.model.resource import Resource
from topfive.domain.repository import ResourceRepository, SectionRepository
from topfive.domain.value import RankingStrategy, SectionId, SectionName

from .base import Service
from .score_engine import ScoreEngine


@dataclass(frozen=True)
class RankedResource:
    """A resource together with the score it was ranked by."""

    resource: Resource
    score: float


class RankingService(Service):
    """Computes top-N resource listings for a section.

    Scores are derived from the vote counters, not stored, so ranking
    fetches the whole section and sorts in memory. Equal scores are
    ordered newest first, then by the order the repository returned them.
    No locks are taken; counters may be slightly stale under concurrent
    voting.
    """

    def __init__(
        self,
        resource_repository: ResourceRepository,
        section_repository: SectionRepository,
        score_engine: ScoreEngine,
    ) -> None:
        """Initialize ranking service.

        Args:
            resource_repository: Resource repository
            section_repository: Section repository
            score_engine: Scoring policy
        """
        self.resource_repository = resource_repository
        self.section_repository = section_repository
        self.score_engine = score_engine

    def _score(self, resource: Resource, strategy: RankingStrategy) -> float:
        if strategy is RankingStrategy.HOT:
            return self.score_engine.hot(
                resource.up_votes, resource.down_votes, resource.created_at
            )
        return self.score_engine.score(resource.up_votes, resource.down_votes)

    def rank(
        self,
        resources: list[Resource],
        n: int,
        strategy: RankingStrategy = RankingStrategy.CONFIDENCE,
    ) -> list[RankedResource]:
        """Score, sort and truncate a list of resources.

        Args:
            resources: Candidate resources
            n: Maximum number of results
            strategy: Scoring strategy

        Returns:
            Up to n ranked resources, best first

        Raises:
            ValueError: If n is not positive
        """
        if n < 1:
            raise ValueError("n must be at least 1")

        ranked = [RankedResource(r, self._score(r, strategy)) for r in resources]
        # Two stable passes: newest first, then by score
        ranked.sort(key=lambda item: item.resource.created_at, reverse=True)
        ranked.sort(key=lambda item: item.score, reverse=True)
        return ranked[:n]

    async def top_n(
        self,
        section_id: SectionId,
        n: int = 5,
        strategy: RankingStrategy = RankingStrategy.CONFIDENCE,
    ) -> list[RankedResource]:
        """Top n resources of a section.

        Args:
            section_id: Section ID
            n: Maximum number of results
            strategy: Scoring strategy

        Returns:
            Up to n ranked resources; empty for an unknown or empty section
        """
        with logfire.span(
            "ranking_service.top_n",
            section_id=str(section_id),
            n=n,
            strategy=strategy.value,
        ):
            resources = await self.resource_repository.find_by_section(section_id)
            ranked = self.rank(resources, n, strategy)
            logfire.info(
                "Ranked section",
                section_id=str(section_id),
                candidates=len(resources),
                returned=len(ranked),
            )
            return ranked

    async def top_n_by_section_name(
        self,
        name: SectionName,
        n: int = 5,
        strategy: RankingStrategy = RankingStrategy.CONFIDENCE,
    ) -> list[RankedResource]:
        """Top n resources of the section with the given name.

        Returns:
            Up to n ranked resources; empty if no section has that name
        """
        if n < 1:
            raise ValueError("n must be at least 1")

        section = await self.section_repository.find_by_name(name)
        if section is None:
            logfire.info("Ranking requested for unknown section", section=str(name))
            return []

        return await self.top_n(section.id, n, strategy)
