"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from topfive.domain.model import Resource, Section, Vote
from topfive.domain.value import (
    Handle,
    ResourceId,
    SectionId,
    SectionName,
    UserId,
    VoteDirection,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_section(row: Dict[str, Any]) -> Section:
    """Convert database row to Section domain model.

    Args:
        row: Database row as dict

    Returns:
        Section domain model
    """
    return Section(
        id=SectionId(_uuid(row["id"])),
        name=SectionName(row["name"]),
        description=row.get("description") or "",
        created_at=row["created_at"],
    )


def section_to_dict(section: Section) -> Dict[str, Any]:
    """Convert Section domain model to database dict."""
    return section.model_dump()


def row_to_resource(row: Dict[str, Any]) -> Resource:
    """Convert database row to Resource domain model.

    Args:
        row: Database row as dict

    Returns:
        Resource domain model
    """
    return Resource(
        id=ResourceId(_uuid(row["id"])),
        section_id=SectionId(_uuid(row["section_id"])),
        name=row["name"],
        url=row["url"],
        owner_id=UserId(_uuid(row["owner_id"])),
        owner_handle=Handle(row["owner_handle"]),
        up_votes=row["up_votes"],
        down_votes=row["down_votes"],
        created_at=row["created_at"],
    )


def resource_to_dict(resource: Resource) -> Dict[str, Any]:
    """Convert Resource domain model to database dict.

    total_votes is computed and has no column.
    """
    return resource.model_dump(exclude={"total_votes"})


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        resource_id=ResourceId(_uuid(row["resource_id"])),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["direction"] = vote.direction.value
    return data
