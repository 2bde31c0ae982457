"""Domain model entities for Top Five."""

from topfive.domain.model.resource import Resource
from topfive.domain.model.section import Section
from topfive.domain.model.vote import Vote

__all__ = [
    "Resource",
    "Section",
    "Vote",
]
