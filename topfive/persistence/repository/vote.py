"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from topfive.domain.model import Vote
from topfive.domain.repository import VoteRepository
from topfive.domain.value import ResourceId, UserId, VoteDirection, VoteId
from topfive.persistence.mappers import row_to_vote, vote_to_dict
from topfive.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_resource(
        self, user_id: UserId, resource_id: ResourceId
    ) -> Optional[Vote]:
        """Find a user's vote on a resource."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.resource_id == resource_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_resources(
        self, user_id: UserId, resource_ids: Sequence[ResourceId]
    ) -> List[Vote]:
        """Find a user's votes on several resources (batch query)."""
        if not resource_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.resource_id.in_(resource_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_resource(self, resource_id: ResourceId) -> List[Vote]:
        """Find all votes on a resource."""
        stmt = select(votes_table).where(votes_table.c.resource_id == resource_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises IntegrityError through the unique_vote constraint on duplicates.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_direction(
        self, vote_id: VoteId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Change the direction of a vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(direction=direction.value, updated_at=datetime.now())
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
