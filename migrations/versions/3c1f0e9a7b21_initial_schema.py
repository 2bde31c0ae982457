"""initial_schema

Create the schema for Top Five:
- Sections (named groups of resources)
- Resources (links with denormalised up/down vote counters)
- Votes (one per user and resource, up or down)

Revision ID: 3c1f0e9a7b21
Revises:
Create Date: 2026-10-17 09:12:44.218301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e9a7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM type (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_direction AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # SECTIONS table
    # ========================================================================
    op.create_table(
        "sections",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # ========================================================================
    # RESOURCES table
    # ========================================================================
    op.create_table(
        "resources",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("section_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=300), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("owner_handle", sa.String(length=255), nullable=False),
        sa.Column("up_votes", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column("down_votes", sa.BigInteger(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.CheckConstraint("up_votes >= 0", name="up_votes_non_negative"),
        sa.CheckConstraint("down_votes >= 0", name="down_votes_non_negative"),
        sa.ForeignKeyConstraint(["section_id"], ["sections.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_resources_section_id", "resources", ["section_id"])
    op.create_index("idx_resources_owner_id", "resources", ["owner_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("resource_id", sa.UUID(), nullable=False),
        sa.Column(
            "direction",
            postgresql.ENUM("up", "down", name="vote_direction", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["resource_id"], ["resources.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "resource_id", name="unique_vote"),
    )
    op.create_index("idx_votes_resource_id", "votes", ["resource_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_resource_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_resources_owner_id", table_name="resources")
    op.drop_index("idx_resources_section_id", table_name="resources")
    op.drop_table("resources")
    op.drop_table("sections")
    op.execute("DROP TYPE IF EXISTS vote_direction")
