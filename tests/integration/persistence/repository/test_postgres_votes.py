"""Integration tests for the PostgreSQL vote path.

Require a migrated database at DATABASE__URL. Run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from topfive.domain.model import Vote
from topfive.domain.repository import (
    ResourceRepository,
    SectionRepository,
    UnitOfWork,
    VoteRepository,
)
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import VoteDirection, VoteId
from tests.conftest import make_resource, make_section, new_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

integration_env = create_env_fixture(unmock={"persistence"})


async def _seed_resource(env, **kwargs):
    unit_of_work = await env.get(UnitOfWork)
    section_repo = await env.get(SectionRepository)
    resource_repo = await env.get(ResourceRepository)
    section = make_section(f"section-{uuid4()}")
    resource = make_resource(section, **kwargs)
    async with unit_of_work:
        await section_repo.save(section)
        await resource_repo.save(resource)
    return resource


class TestPostgresVotePath:
    """Vote writes against a real database."""

    @pytest.mark.asyncio
    async def test_lifecycle_updates_counters(self, integration_env):
        # Arrange
        coordinator = await integration_env.get(VoteCoordinator)
        resource_repo = await integration_env.get(ResourceRepository)
        resource = await _seed_resource(integration_env)
        user_id = new_user()

        # Act / Assert
        await coordinator.create_vote(user_id, resource.id, VoteDirection.UP)
        stored = await resource_repo.find_by_id(resource.id)
        assert (stored.up_votes, stored.down_votes) == (1, 0)

        await coordinator.change_vote(user_id, resource.id, VoteDirection.DOWN)
        stored = await resource_repo.find_by_id(resource.id)
        assert (stored.up_votes, stored.down_votes) == (0, 1)

        await coordinator.remove_vote(user_id, resource.id)
        stored = await resource_repo.find_by_id(resource.id)
        assert (stored.up_votes, stored.down_votes) == (0, 0)

    @pytest.mark.asyncio
    async def test_unique_constraint_rejects_duplicate(self, integration_env):
        # Arrange
        unit_of_work = await integration_env.get(UnitOfWork)
        vote_repo = await integration_env.get(VoteRepository)
        resource = await _seed_resource(integration_env)
        user_id = new_user()

        def vote(direction):
            return Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                resource_id=resource.id,
                direction=direction,
            )

        async with unit_of_work:
            await vote_repo.save(vote(VoteDirection.UP))

        # Act / Assert
        with pytest.raises(IntegrityError):
            async with unit_of_work:
                await vote_repo.save(vote(VoteDirection.DOWN))

        votes = await vote_repo.find_by_resource(resource.id)
        assert [v.direction for v in votes] == [VoteDirection.UP]

    @pytest.mark.asyncio
    async def test_guarded_decrement_stops_at_zero(self, integration_env):
        unit_of_work = await integration_env.get(UnitOfWork)
        resource_repo = await integration_env.get(ResourceRepository)
        resource = await _seed_resource(integration_env, up_votes=1)

        async with unit_of_work:
            await resource_repo.decrement_votes(resource.id, VoteDirection.UP)
            updated = await resource_repo.decrement_votes(resource.id, VoteDirection.UP)

        assert updated.up_votes == 0
