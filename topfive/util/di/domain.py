"""Domain layer DI providers."""

from dishka import Scope, provide

from topfive.config import AuthSettings, RankingSettings, VotingSettings
from topfive.domain.repository import (
    ResourceRepository,
    SectionRepository,
    UnitOfWork,
    VoteRepository,
)
from topfive.domain.service import (
    CounterLedger,
    JWTService,
    RankingService,
    ResourceLockRegistry,
    ScoreEngine,
    VoteCoordinator,
    VoteStore,
)
from topfive.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The lock registry is APP-scoped so every request serialises on the same
    per-resource locks.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_lock_registry(self) -> ResourceLockRegistry:
        """Provide the application-wide resource lock registry."""
        return ResourceLockRegistry()

    @provide(scope=Scope.APP)
    def get_score_engine(self, ranking_settings: RankingSettings) -> ScoreEngine:
        """Provide score engine."""
        return ScoreEngine(ranking_settings=ranking_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_vote_store(self, vote_repository: VoteRepository) -> VoteStore:
        """Provide vote record store."""
        return VoteStore(vote_repository=vote_repository)

    @provide
    def get_counter_ledger(
        self, resource_repository: ResourceRepository
    ) -> CounterLedger:
        """Provide resource counter ledger."""
        return CounterLedger(resource_repository=resource_repository)

    @provide
    def get_vote_coordinator(
        self,
        vote_store: VoteStore,
        counter_ledger: CounterLedger,
        resource_repository: ResourceRepository,
        unit_of_work: UnitOfWork,
        lock_registry: ResourceLockRegistry,
        voting_settings: VotingSettings,
    ) -> VoteCoordinator:
        """Provide vote coordinator."""
        return VoteCoordinator(
            vote_store=vote_store,
            counter_ledger=counter_ledger,
            resource_repository=resource_repository,
            unit_of_work=unit_of_work,
            lock_registry=lock_registry,
            voting_settings=voting_settings,
        )

    @provide
    def get_ranking_service(
        self,
        resource_repository: ResourceRepository,
        section_repository: SectionRepository,
        score_engine: ScoreEngine,
    ) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(
            resource_repository=resource_repository,
            section_repository=section_repository,
            score_engine=score_engine,
        )
