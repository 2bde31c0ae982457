"""Unit tests for GetTopResourcesUseCase."""

import pytest

from topfive.application.usecase.ranking import (
    GetTopResourcesRequest,
    GetTopResourcesUseCase,
)
from topfive.domain.repository import ResourceRepository, SectionRepository
from topfive.domain.service import VoteCoordinator
from topfive.domain.value import VoteDirection
from tests.conftest import make_resource, make_section, new_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_section(unit_env, name, rows):
    section_repo = await unit_env.get(SectionRepository)
    resource_repo = await unit_env.get(ResourceRepository)
    section = await section_repo.save(make_section(name))
    resources = []
    for resource_name, up, down in rows:
        resources.append(
            await resource_repo.save(
                make_resource(section, resource_name, up_votes=up, down_votes=down)
            )
        )
    return section, resources


class TestGetTopResourcesUseCase:
    """Tests for GetTopResourcesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_top_five_best_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTopResourcesUseCase)
        await _seed_section(
            unit_env,
            "Python Tutorials",
            [
                ("Low", 5, 10),
                ("High", 100, 5),
                ("A", 40, 10),
                ("B", 30, 10),
                ("C", 20, 10),
                ("D", 15, 10),
            ],
        )

        # Act
        response = await use_case.execute(
            GetTopResourcesRequest(section="Python Tutorials")
        )

        # Assert
        names = [item.name for item in response.resources]
        assert len(names) == 5
        assert names[0] == "High"
        assert "Low" not in names

    @pytest.mark.asyncio
    async def test_items_carry_counts_and_owner(self, unit_env):
        use_case = await unit_env.get(GetTopResourcesUseCase)
        _, (resource,) = await _seed_section(unit_env, "Tools", [("uv", 12, 3)])

        response = await use_case.execute(GetTopResourcesRequest(section="Tools", n=1))

        (item,) = response.resources
        assert item.id == str(resource.id)
        assert (item.up_votes, item.down_votes, item.total_votes) == (12, 3, 15)
        assert item.owner.root == "alice"
        assert item.score > 0
        assert item.user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_section_is_empty(self, unit_env):
        use_case = await unit_env.get(GetTopResourcesUseCase)

        response = await use_case.execute(GetTopResourcesRequest(section="empty-section"))

        assert response.resources == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("section", ["   ", "", "x" * 101])
    async def test_unusable_section_name_is_empty(self, unit_env, section):
        use_case = await unit_env.get(GetTopResourcesUseCase)

        response = await use_case.execute(GetTopResourcesRequest(section=section))

        assert response.section == section
        assert response.resources == []

    @pytest.mark.asyncio
    async def test_includes_callers_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTopResourcesUseCase)
        coordinator = await unit_env.get(VoteCoordinator)
        _, (liked, disliked, ignored) = await _seed_section(
            unit_env, "Books", [("Liked", 50, 1), ("Disliked", 30, 5), ("Ignored", 10, 9)]
        )
        user_id = new_user()
        await coordinator.create_vote(user_id, liked.id, VoteDirection.UP)
        await coordinator.create_vote(user_id, disliked.id, VoteDirection.DOWN)

        # Act
        response = await use_case.execute(
            GetTopResourcesRequest(section="Books", user_id=str(user_id))
        )

        # Assert
        votes = {item.name: item.user_vote for item in response.resources}
        assert votes == {"Liked": True, "Disliked": False, "Ignored": None}
