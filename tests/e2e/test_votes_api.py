"""End-to-end tests for the vote endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from topfive.config import Settings
from topfive.domain.service import JWTService
from topfive.interface.api.app import create_app
from topfive.persistence.repository.inmemory import InMemoryDatabase
from topfive.util.di.container import setup_di
from tests.conftest import make_resource, make_section, new_user
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with in-memory persistence."""
    return build_test_container()


@pytest.fixture
def database(container):
    """Shared in-memory storage behind the test container."""
    return asyncio.run(container.get(InMemoryDatabase))


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    return TestClient(app_instance)


@pytest.fixture
def resource(database):
    """A resource with no votes."""
    section = make_section()
    database.sections[section.id] = section
    resource = make_resource(section)
    database.resources[resource.id] = resource
    return resource


@pytest.fixture
def auth_cookies():
    """Cookies for a freshly signed-in user."""
    token = JWTService(Settings().auth).create_token(str(new_user()), "alice")
    return {"auth_token": token}


class TestVoteEndpoints:
    """End-to-end tests for /votes.

    Detailed business rules are covered by the unit tests.
    """

    def test_full_vote_lifecycle(self, client, database, resource, auth_cookies):
        # Create
        response = client.post(
            "/votes",
            json={"resource_id": str(resource.id), "direction": True},
            cookies=auth_cookies,
        )
        assert response.status_code == 201
        assert response.json()["direction"] is True
        assert database.resources[resource.id].up_votes == 1

        # Read
        response = client.get(
            "/votes", params={"resource_id": str(resource.id)}, cookies=auth_cookies
        )
        assert response.status_code == 200
        assert response.json()["resource_id"] == str(resource.id)

        # Change
        response = client.put(
            "/votes",
            json={"resource_id": str(resource.id), "direction": False},
            cookies=auth_cookies,
        )
        assert response.status_code == 200
        assert response.json()["direction"] is False
        stored = database.resources[resource.id]
        assert (stored.up_votes, stored.down_votes) == (0, 1)

        # Remove
        response = client.delete(
            "/votes", params={"resource_id": str(resource.id)}, cookies=auth_cookies
        )
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert database.resources[resource.id].total_votes == 0
        assert database.votes == {}

    def test_duplicate_vote_returns_409(self, client, resource, auth_cookies):
        body = {"resource_id": str(resource.id), "direction": True}
        assert client.post("/votes", json=body, cookies=auth_cookies).status_code == 201

        response = client.post("/votes", json=body, cookies=auth_cookies)

        assert response.status_code == 409

    def test_vote_on_missing_resource_returns_404(self, client, auth_cookies):
        response = client.post(
            "/votes",
            json={"resource_id": str(uuid4()), "direction": True},
            cookies=auth_cookies,
        )

        assert response.status_code == 404

    def test_get_without_vote_returns_404(self, client, resource, auth_cookies):
        response = client.get(
            "/votes", params={"resource_id": str(resource.id)}, cookies=auth_cookies
        )

        assert response.status_code == 404

    def test_change_without_vote_returns_404(self, client, resource, auth_cookies):
        response = client.put(
            "/votes",
            json={"resource_id": str(resource.id), "direction": False},
            cookies=auth_cookies,
        )

        assert response.status_code == 404

    def test_bearer_header_is_accepted(self, client, resource, auth_cookies):
        headers = {"Authorization": f"Bearer {auth_cookies['auth_token']}"}

        response = client.post(
            "/votes",
            json={"resource_id": str(resource.id), "direction": False},
            headers=headers,
        )

        assert response.status_code == 201

    def test_vote_without_auth_returns_401(self, client, resource):
        response = client.post(
            "/votes", json={"resource_id": str(resource.id), "direction": True}
        )

        assert response.status_code == 401

    def test_vote_with_invalid_token_returns_401(self, client, resource):
        response = client.delete(
            "/votes",
            params={"resource_id": str(resource.id)},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_malformed_resource_id_returns_422(self, client, auth_cookies):
        response = client.post(
            "/votes",
            json={"resource_id": "not-a-uuid", "direction": True},
            cookies=auth_cookies,
        )

        assert response.status_code == 422
