"""Strongly typed identifiers for Top Five domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
SectionId = NewType("SectionId", UUID)
ResourceId = NewType("ResourceId", UUID)
VoteId = NewType("VoteId", UUID)
