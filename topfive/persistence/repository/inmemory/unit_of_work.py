"""In-memory unit of work for testing."""

from topfive.domain.repository import UnitOfWork
from topfive.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work that undoes journaled in-memory writes on rollback."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def begin(self) -> None:
        self._db.begin()

    async def commit(self) -> None:
        self._db.commit()

    async def rollback(self) -> None:
        self._db.rollback()
