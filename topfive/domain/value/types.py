"""Domain value objects for Top Five.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from topfive.domain.value.common import RootValueObject


class VoteDirection(str, Enum):
    """Direction of a vote.

    Clients send directions as booleans (true = up, false = down);
    use from_bool/as_bool at the boundary.
    """

    UP = "up"
    DOWN = "down"

    @classmethod
    def from_bool(cls, is_up: bool) -> "VoteDirection":
        """Map the boolean wire form to a direction."""
        return cls.UP if is_up else cls.DOWN

    @property
    def as_bool(self) -> bool:
        """Boolean wire form (True for an upvote)."""
        return self is VoteDirection.UP


class RankingStrategy(str, Enum):
    """How a top-N listing is ordered."""

    CONFIDENCE = "confidence"  # Wilson score lower bound
    HOT = "hot"  # Net votes weighted by creation time


class SectionName(RootValueObject[str]):
    """Human readable section name, unique across the site.

    Examples: 'Python Tutorials', 'Rust crates'
    """

    @field_validator("root")
    @classmethod
    def validate_section_name(cls, v: str) -> str:
        """Validate section name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Section name must be 1-100 characters")
        return v


class Handle(RootValueObject[str]):
    """Display name of a user, denormalised onto the resources they own."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
