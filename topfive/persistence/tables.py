"""SQLAlchemy table definitions for Top Five.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# SECTIONS TABLE
# ============================================================================
sections_table = Table(
    "sections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# RESOURCES TABLE
# ============================================================================
resources_table = Table(
    "resources",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "section_id",
        UUID,
        ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("name", String(300), nullable=False),
    Column("url", Text, nullable=False),
    Column("owner_id", UUID, nullable=False),
    Column("owner_handle", String(255), nullable=False),  # Denormalized from users
    Column("up_votes", BigInteger, nullable=False, server_default="0"),
    Column("down_votes", BigInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("up_votes >= 0", name="up_votes_non_negative"),
    CheckConstraint("down_votes >= 0", name="down_votes_non_negative"),
)

Index("idx_resources_section_id", resources_table.c.section_id)
Index("idx_resources_owner_id", resources_table.c.owner_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, nullable=False),
    Column(
        "resource_id",
        UUID,
        ForeignKey("resources.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "resource_id", name="unique_vote"),
)

Index("idx_votes_resource_id", votes_table.c.resource_id)
