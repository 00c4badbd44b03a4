"""
Fixtures for integration tests: the full application wired to an
in-memory MongoDB through the normal lifespan and DI container.
"""
import pytest
from fastapi.testclient import TestClient

from user_directory.main import create_application


@pytest.fixture
def application(settings, mongo_database):
    return create_application(settings=settings, database=mongo_database)


@pytest.fixture
def client(application):
    with TestClient(application) as c:
        yield c


@pytest.fixture
def create_user(client):
    """Create a user through REST and return the response body."""
    def _create(username: str, **overrides):
        payload = {
            "firstName": "First",
            "lastName": "Last",
            "username": username,
            "email": f"{username}@x.com",
        }
        payload.update(overrides)
        response = client.post("/users", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _create

