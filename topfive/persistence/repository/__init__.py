"""PostgreSQL repository implementations."""

from topfive.persistence.repository.resource import PostgresResourceRepository
from topfive.persistence.repository.section import PostgresSectionRepository
from topfive.persistence.repository.unit_of_work import PostgresUnitOfWork
from topfive.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresResourceRepository",
    "PostgresSectionRepository",
    "PostgresUnitOfWork",
    "PostgresVoteRepository",
]
