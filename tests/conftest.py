"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Small seed directories for repository and service tests
- In-memory repository instances
"""

import pytest

from src.adapters.repository.memory import InMemoryActivityRepository
from src.domain.ports import Activity


@pytest.fixture
def seed_activities() -> list[Activity]:
    """Two small activities, one with a single free seat."""
    return [
        Activity(
            name="Chess Club",
            description="Learn strategies and compete in chess tournaments",
            schedule="Fridays, 3:30 PM - 5:00 PM",
            max_participants=12,
            participants=["michael@mergington.edu"],
        ),
        Activity(
            name="Tiny Club",
            description="A club with very few seats",
            schedule="Mondays, 3:00 PM",
            max_participants=2,
            participants=["first@mergington.edu"],
        ),
    ]


@pytest.fixture
def repository(seed_activities: list[Activity]) -> InMemoryActivityRepository:
    """Create repository instance for each test."""
    return InMemoryActivityRepository(seed_activities)
