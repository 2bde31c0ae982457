"""Mock persistence providers for testing."""

from dishka import Scope, provide

from topfive.domain.repository import (
    ResourceRepository,
    SectionRepository,
    UnitOfWork,
    VoteRepository,
)
from topfive.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryResourceRepository,
    InMemorySectionRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from topfive.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database is APP-scoped so every request in a container sees the
    same data; each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide shared in-memory storage."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, database: InMemoryDatabase) -> UnitOfWork:
        """Provide in-memory unit of work."""
        return InMemoryUnitOfWork(database)

    @provide(scope=Scope.REQUEST)
    def get_section_repository(self, database: InMemoryDatabase) -> SectionRepository:
        """Provide in-memory section repository."""
        return InMemorySectionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(
        self, database: InMemoryDatabase
    ) -> ResourceRepository:
        """Provide in-memory resource repository."""
        return InMemoryResourceRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, database: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(database)
