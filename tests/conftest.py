"""Pytest configuration and fixtures."""
import os

os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", "test-secret")

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from app.database import get_database
from app.main import app
from app.utils.auth import create_access_token


USER_ID = "6911131d956adeac5dc51198"


def make_collection():
    """
    Build a mock Motor collection.

    Defaults: nothing found, inserts succeed, updates match one row,
    ``find().sort().to_list()`` returns no documents.
    """
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.insert_many = AsyncMock(
        side_effect=lambda docs: MagicMock(inserted_ids=[ObjectId() for _ in docs])
    )
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
    collection.find.return_value.sort.return_value.to_list = AsyncMock(return_value=[])
    return collection


class MockDatabase(dict):
    """Collections are created on first access, so tests can inspect what was touched."""

    def __missing__(self, name):
        collection = make_collection()
        self[name] = collection
        return collection


@pytest.fixture
def mock_db():
    """Fresh mock database."""
    return MockDatabase()


@pytest.fixture
def auth_headers():
    """Bearer headers for USER_ID."""
    token = create_access_token(user_id=USER_ID)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def app_client(mock_db):
    """
    Create a test client backed by the mock database.

    The database dependency is overridden, so no MongoDB is needed.
    """
    app.dependency_overrides[get_database] = lambda: mock_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    """ID of the signed-in test user."""
    return USER_ID
