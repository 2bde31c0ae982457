"""Application layer DI providers."""

from dishka import Scope, provide

from topfive.application.usecase.ranking import GetTopResourcesUseCase
from topfive.application.usecase.vote import (
    ChangeVoteUseCase,
    CreateVoteUseCase,
    GetVoteUseCase,
    RemoveVoteUseCase,
)
from topfive.domain.service import RankingService, VoteCoordinator, VoteStore
from topfive.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_get_vote_use_case(
        self, vote_coordinator: VoteCoordinator
    ) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_coordinator=vote_coordinator)

    @provide(scope=Scope.REQUEST)
    def get_create_vote_use_case(
        self, vote_coordinator: VoteCoordinator
    ) -> CreateVoteUseCase:
        """Provide create vote use case."""
        return CreateVoteUseCase(vote_coordinator=vote_coordinator)

    @provide(scope=Scope.REQUEST)
    def get_change_vote_use_case(
        self, vote_coordinator: VoteCoordinator
    ) -> ChangeVoteUseCase:
        """Provide change vote use case."""
        return ChangeVoteUseCase(vote_coordinator=vote_coordinator)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self, vote_coordinator: VoteCoordinator
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_coordinator=vote_coordinator)

    # Ranking use cases
    @provide(scope=Scope.REQUEST)
    def get_get_top_resources_use_case(
        self, ranking_service: RankingService, vote_store: VoteStore
    ) -> GetTopResourcesUseCase:
        """Provide get top resources use case."""
        return GetTopResourcesUseCase(
            ranking_service=ranking_service, vote_store=vote_store
        )
