"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from topfive.config import Settings
from topfive.domain.repository import (
    ResourceRepository,
    SectionRepository,
    UnitOfWork,
    VoteRepository,
)
from topfive.persistence.database import create_engine, create_session_factory
from topfive.persistence.repository import (
    PostgresResourceRepository,
    PostgresSectionRepository,
    PostgresUnitOfWork,
    PostgresVoteRepository,
)
from topfive.util.di.base import ProviderBase
from topfive.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Vote writes commit through the unit of work; anything left pending
        is committed at the end of the request, or rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return PostgresUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_section_repository(self, session: AsyncSession) -> SectionRepository:
        """Provide Section repository."""
        return PostgresSectionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, session: AsyncSession) -> ResourceRepository:
        """Provide Resource repository."""
        return PostgresResourceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)
