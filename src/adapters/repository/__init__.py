"""Repository adapters - Activity directory implementations."""

from .memory import InMemoryActivityRepository
from .seed import DEFAULT_ACTIVITIES, load_seed

__all__ = ["DEFAULT_ACTIVITIES", "InMemoryActivityRepository", "load_seed"]
