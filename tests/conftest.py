"""
Shared pytest fixtures for user directory tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from mongomock_motor import AsyncMongoMockClient

from user_directory.core.config import Settings


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_HOST": "db.internal",
        "MONGO_PORT": "27018",
        "MONGO_USER": "directory",
        "MONGO_PASSWORD": "s3cret",
        "MONGO_DBNAME": "test_directory",
        "MONGO_URL": "mongodb://<user>:<password>@<host>:<port>/<dbname>",
        "DEBUG": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env):
    """Settings built from the test environment."""
    return Settings()


@pytest.fixture
def mongo_database(settings):
    """In-memory MongoDB database."""
    client = AsyncMongoMockClient()
    return client[settings.mongo_dbname]


@pytest.fixture
def user_collection(mongo_database, settings):
    return mongo_database[settings.mongo_collection]


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository; async lookups plus a synchronous ID check."""
    repo = AsyncMock()
    repo.is_valid_id = MagicMock(return_value=True)
    return repo
