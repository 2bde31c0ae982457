"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .resource import InMemoryResourceRepository
from .section import InMemorySectionRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryResourceRepository",
    "InMemorySectionRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
