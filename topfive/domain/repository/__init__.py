"""Repository interfaces for Top Five domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from topfive.domain.repository.resource import ResourceRepository
from topfive.domain.repository.section import SectionRepository
from topfive.domain.repository.unit_of_work import UnitOfWork
from topfive.domain.repository.vote import VoteRepository

__all__ = [
    "ResourceRepository",
    "SectionRepository",
    "UnitOfWork",
    "VoteRepository",
]
