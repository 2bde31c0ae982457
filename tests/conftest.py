"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from topfive.domain.model import Resource, Section
from topfive.domain.value import (
    Handle,
    ResourceId,
    SectionId,
    SectionName,
    UserId,
)

# Spans and events stay local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_section(name: str = "Python Tutorials") -> Section:
    """Build a section with a fresh ID."""
    return Section(id=SectionId(uuid4()), name=SectionName(name))


def make_resource(
    section: Section,
    name: str = "Resource",
    up_votes: int = 0,
    down_votes: int = 0,
    age_minutes: int = 0,
) -> Resource:
    """Build a resource in a section.

    Args:
        section: Owning section
        name: Display name
        up_votes: Initial upvote counter
        down_votes: Initial downvote counter
        age_minutes: How long before BASE_TIME it was created

    Returns:
        Resource with a fresh ID
    """
    return Resource(
        id=ResourceId(uuid4()),
        section_id=section.id,
        name=name,
        url=f"https://example.com/{name.lower().replace(' ', '-')}",
        owner_id=UserId(uuid4()),
        owner_handle=Handle("alice"),
        up_votes=up_votes,
        down_votes=down_votes,
        created_at=BASE_TIME - timedelta(minutes=age_minutes),
    )


def new_user() -> UserId:
    """Fresh user ID."""
    return UserId(uuid4())
