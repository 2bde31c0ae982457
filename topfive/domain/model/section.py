"""Section entity.

Sections group resources under a category; a top-N listing is always
computed for one section.
"""

from datetime import datetime

from pydantic import Field

from topfive.domain.model.common import DomainModel
from topfive.domain.value import SectionId, SectionName


class Section(DomainModel):
    """A named list of resources that can be ranked."""

    id: SectionId
    name: SectionName
    description: str = Field(default="", max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
