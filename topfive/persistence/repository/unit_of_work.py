"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from topfive.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work bound to the request's database session.

    The repositories share the same session, so everything they write
    between begin() and commit() lands in one database transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def begin(self) -> None:
        """Start a transaction unless the session already has one."""
        if not self.session.in_transaction():
            await self.session.begin()

    async def commit(self) -> None:
        """Commit the session's transaction."""
        await self.session.commit()
        logfire.debug("Unit of work committed")

    async def rollback(self) -> None:
        """Roll back the session's transaction."""
        await self.session.rollback()
        logfire.info("Unit of work rolled back")
