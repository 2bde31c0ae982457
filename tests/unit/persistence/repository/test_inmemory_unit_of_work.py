"""Unit tests for the in-memory unit of work and repositories."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from topfive.domain.error import PersistenceFailureError
from topfive.domain.model import Vote
from topfive.domain.value import VoteDirection, VoteId
from topfive.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryResourceRepository,
    InMemorySectionRepository,
    InMemoryUnitOfWork,
    InMemoryVoteRepository,
)
from tests.conftest import make_resource, make_section, new_user


@pytest.fixture
def database():
    return InMemoryDatabase()


class TestInMemoryUnitOfWork:
    """Journaled commit and rollback."""

    @pytest.mark.asyncio
    async def test_commit_keeps_writes(self, database):
        resources = InMemoryResourceRepository(database)
        resource = make_resource(make_section())

        async with InMemoryUnitOfWork(database):
            await resources.save(resource)
            await resources.increment_votes(resource.id, VoteDirection.UP)

        stored = await resources.find_by_id(resource.id)
        assert stored.up_votes == 1

    @pytest.mark.asyncio
    async def test_error_rolls_back_every_write(self, database):
        # Arrange
        resources = InMemoryResourceRepository(database)
        resource = await resources.save(make_resource(make_section(), up_votes=2))

        # Act
        with pytest.raises(RuntimeError):
            async with InMemoryUnitOfWork(database):
                await resources.increment_votes(resource.id, VoteDirection.UP)
                await resources.increment_votes(resource.id, VoteDirection.DOWN)
                raise RuntimeError("abort")

        # Assert
        stored = await resources.find_by_id(resource.id)
        assert (stored.up_votes, stored.down_votes) == (2, 0)

    @pytest.mark.asyncio
    async def test_rollback_restores_deleted_vote(self, database):
        votes = InMemoryVoteRepository(database)
        vote = await votes.save(
            Vote(
                id=VoteId(uuid4()),
                user_id=new_user(),
                resource_id=make_resource(make_section()).id,
                direction=VoteDirection.UP,
            )
        )

        with pytest.raises(RuntimeError):
            async with InMemoryUnitOfWork(database):
                assert await votes.delete(vote.id)
                raise RuntimeError("abort")

        assert await votes.find_by_id(vote.id) == vote

    @pytest.mark.asyncio
    async def test_failed_commit_raises_persistence_failure(self, database, monkeypatch):
        sections = InMemorySectionRepository(database)
        unit_of_work = InMemoryUnitOfWork(database)
        section = make_section()

        def failing_commit():
            raise RuntimeError("disk full")

        monkeypatch.setattr(database, "commit", failing_commit)

        with pytest.raises(PersistenceFailureError):
            async with unit_of_work:
                await sections.save(section)

        assert await sections.find_by_id(section.id) is None

    @pytest.mark.asyncio
    async def test_concurrent_units_roll_back_independently(self, database):
        # Arrange
        resources = InMemoryResourceRepository(database)
        section = make_section()
        kept = await resources.save(make_resource(section, "Kept"))
        dropped = await resources.save(make_resource(section, "Dropped"))
        started = asyncio.Event()

        async def commits():
            async with InMemoryUnitOfWork(database):
                await resources.increment_votes(kept.id, VoteDirection.UP)
                await started.wait()

        async def aborts():
            with pytest.raises(RuntimeError):
                async with InMemoryUnitOfWork(database):
                    await resources.increment_votes(dropped.id, VoteDirection.UP)
                    started.set()
                    raise RuntimeError("abort")

        # Act
        await asyncio.gather(commits(), aborts())

        # Assert
        assert (await resources.find_by_id(kept.id)).up_votes == 1
        assert (await resources.find_by_id(dropped.id)).up_votes == 0


class TestInMemoryRepositories:
    """Repository behaviour shared with the PostgreSQL implementations."""

    @pytest.mark.asyncio
    async def test_duplicate_vote_raises_integrity_error(self, database):
        votes = InMemoryVoteRepository(database)
        user_id = new_user()
        resource_id = make_resource(make_section()).id
        await votes.save(
            Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                resource_id=resource_id,
                direction=VoteDirection.UP,
            )
        )

        with pytest.raises(IntegrityError):
            await votes.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    resource_id=resource_id,
                    direction=VoteDirection.DOWN,
                )
            )

    @pytest.mark.asyncio
    async def test_decrement_never_goes_negative(self, database):
        resources = InMemoryResourceRepository(database)
        resource = await resources.save(make_resource(make_section()))

        updated = await resources.decrement_votes(resource.id, VoteDirection.DOWN)

        assert updated.down_votes == 0

    @pytest.mark.asyncio
    async def test_find_section_by_name(self, database):
        sections = InMemorySectionRepository(database)
        section = await sections.save(make_section("Go modules"))

        found = await sections.find_by_name(section.name)

        assert found == section
