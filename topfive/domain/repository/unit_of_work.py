"""Unit of work interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type

from topfive.domain.error import PersistenceFailureError


class UnitOfWork(ABC):
    """Transaction boundary spanning several repository writes.

    Used as an async context manager: changes made inside the block are
    committed together on a clean exit and rolled back together if the
    block raises. A failed commit is rolled back and surfaces as
    PersistenceFailureError.

        async with unit_of_work:
            await vote_repository.save(vote)
            await resource_repository.increment_votes(resource_id, direction)
    """

    async def __aenter__(self) -> "UnitOfWork":
        await self.begin()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            await self.rollback()
            return

        try:
            await self.commit()
        except Exception as e:
            await self.rollback()
            raise PersistenceFailureError(f"Commit failed: {e}") from e
        except BaseException:
            await self.rollback()
            raise

    @abstractmethod
    async def begin(self) -> None:
        """Start tracking changes."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make every change since begin() durable.

        Raises:
            Exception: Any storage error; __aexit__ rolls back and wraps it
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every change since begin()."""
        pass
