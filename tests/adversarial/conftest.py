"""
Shared fixtures for adversarial tests.

Provides a small directory with a tight capacity for race condition tests.
"""

import pytest

from src.adapters.repository.memory import InMemoryActivityRepository
from src.domain.ports import Activity

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

LIMITED_CAPACITY = 5


@pytest.fixture
def capacity() -> int:
    """Seat count of the limited activity."""
    return LIMITED_CAPACITY


@pytest.fixture
def repository() -> InMemoryActivityRepository:
    """Create a repository with one empty, limited activity."""
    return InMemoryActivityRepository(
        [
            Activity(
                name="Limited Club",
                description="Few seats, many students",
                schedule="Fridays, 3:30 PM",
                max_participants=LIMITED_CAPACITY,
            ),
        ]
    )
