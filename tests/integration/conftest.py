"""
Shared fixtures for integration tests.

Each client runs the application lifespan, so every test starts from
a freshly seeded directory.
"""

import uuid
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client with lifespan startup and shutdown."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unique_email() -> str:
    """Email address not present in any seed roster."""
    return f"student{uuid.uuid4().hex}@mergington.edu"
