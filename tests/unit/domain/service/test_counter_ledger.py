"""Unit tests for CounterLedger."""

from uuid import uuid4

import pytest

from topfive.domain.error import ResourceNotFoundError
from topfive.domain.repository import ResourceRepository
from topfive.domain.service import CounterLedger
from topfive.domain.value import ResourceId, VoteDirection
from tests.conftest import make_resource, make_section
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIncrement:
    """Tests for CounterLedger.increment."""

    @pytest.mark.asyncio
    async def test_increment_up_only_touches_up_counter(self, unit_env):
        # Arrange
        ledger = await unit_env.get(CounterLedger)
        resource_repo = await unit_env.get(ResourceRepository)
        resource = await resource_repo.save(
            make_resource(make_section(), up_votes=2, down_votes=4)
        )

        # Act
        updated = await ledger.increment(resource.id, VoteDirection.UP)

        # Assert
        assert updated.up_votes == 3
        assert updated.down_votes == 4

    @pytest.mark.asyncio
    async def test_increment_down(self, unit_env):
        ledger = await unit_env.get(CounterLedger)
        resource_repo = await unit_env.get(ResourceRepository)
        resource = await resource_repo.save(make_resource(make_section()))

        updated = await ledger.increment(resource.id, VoteDirection.DOWN)

        assert (updated.up_votes, updated.down_votes) == (0, 1)

    @pytest.mark.asyncio
    async def test_increment_missing_resource_raises(self, unit_env):
        ledger = await unit_env.get(CounterLedger)

        with pytest.raises(ResourceNotFoundError):
            await ledger.increment(ResourceId(uuid4()), VoteDirection.UP)


class TestDecrement:
    """Tests for CounterLedger.decrement."""

    @pytest.mark.asyncio
    async def test_decrement_down(self, unit_env):
        # Arrange
        ledger = await unit_env.get(CounterLedger)
        resource_repo = await unit_env.get(ResourceRepository)
        resource = await resource_repo.save(
            make_resource(make_section(), up_votes=1, down_votes=2)
        )

        # Act
        updated = await ledger.decrement(resource.id, VoteDirection.DOWN)

        # Assert
        assert (updated.up_votes, updated.down_votes) == (1, 1)

    @pytest.mark.asyncio
    async def test_decrement_at_zero_is_noop(self, unit_env):
        """Counters never go below zero."""
        ledger = await unit_env.get(CounterLedger)
        resource_repo = await unit_env.get(ResourceRepository)
        resource = await resource_repo.save(make_resource(make_section(), down_votes=3))

        updated = await ledger.decrement(resource.id, VoteDirection.UP)

        assert updated.up_votes == 0
        assert updated.down_votes == 3
        stored = await resource_repo.find_by_id(resource.id)
        assert stored.up_votes == 0

    @pytest.mark.asyncio
    async def test_decrement_missing_resource_raises(self, unit_env):
        ledger = await unit_env.get(CounterLedger)

        with pytest.raises(ResourceNotFoundError):
            await ledger.decrement(ResourceId(uuid4()), VoteDirection.DOWN)
