"""
In-memory repository adapter - Implements ActivityRepository protocol.

This module provides the process-memory implementation of the domain's
repository port. State lives for the lifetime of the repository instance,
which the application lifespan creates once and stores in app.state.

Concurrency Design:
-------------------
A single coarse lock guards the whole directory. The directory is small and
every operation is a dictionary lookup plus a list change, so per-activity
locks would add bookkeeping without measurable gain.

1. **Atomic check-and-mutate**: add_participant and remove_participant run
   their existence, duplicate and capacity checks under the same lock as the
   mutation. Two concurrent signups can never both take the last seat.

2. **Consistent snapshots**: list_activities and get_activity copy records
   under the lock, so readers never observe a half-applied change and
   callers cannot mutate directory state through returned objects.
"""

import copy
import logging
import threading
from collections.abc import Iterable

from src.domain.ports import Activity, SignupOutcome, UnregisterOutcome

logger = logging.getLogger(__name__)


class InMemoryActivityRepository:
    """
    Implements ActivityRepository protocol with a locked dictionary.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, activities: Iterable[Activity] = ()) -> None:
        """
        Initialize repository with seed activities.

        Args:
            activities: Initial activity records. Records are copied so the
                caller's objects stay untouched.

        Raises:
            ValueError: If two seed activities share a name
        """
        self._lock = threading.Lock()
        self._activities: dict[str, Activity] = {}

        for activity in activities:
            if activity.name in self._activities:
                raise ValueError(f"Duplicate activity name: {activity.name}")
            self._activities[activity.name] = copy.deepcopy(activity)

    def __len__(self) -> int:
        with self._lock:
            return len(self._activities)

    def list_activities(self) -> dict[str, Activity]:
        """Return deep copies of all activities, keyed by name."""
        with self._lock:
            return copy.deepcopy(self._activities)

    def get_activity(self, name: str) -> Activity | None:
        """Return a deep copy of one activity, or None if unknown."""
        with self._lock:
            activity = self._activities.get(name)
            return copy.deepcopy(activity) if activity is not None else None

    def add_participant(self, name: str, email: str) -> SignupOutcome:
        """
        Atomically add an email to an activity's participants.

        Args:
            name: Activity name (exact match)
            email: Normalized email address

        Returns:
            SignupOutcome.SUCCESS, NOT_FOUND, ALREADY_SIGNED_UP or FULL
        """
        with self._lock:
            activity = self._activities.get(name)
            if activity is None:
                return SignupOutcome.NOT_FOUND

            if email in activity.participants:
                return SignupOutcome.ALREADY_SIGNED_UP

            if activity.spots_left <= 0:
                return SignupOutcome.FULL

            activity.participants.append(email)
            logger.debug(
                "Added %s to %s (%d/%d)",
                email,
                name,
                len(activity.participants),
                activity.max_participants,
            )
            return SignupOutcome.SUCCESS

    def remove_participant(self, name: str, email: str) -> UnregisterOutcome:
        """
        Atomically remove an email from an activity's participants.

        Args:
            name: Activity name (exact match)
            email: Normalized email address

        Returns:
            UnregisterOutcome.SUCCESS, NOT_FOUND or NOT_SIGNED_UP
        """
        with self._lock:
            activity = self._activities.get(name)
            if activity is None:
                return UnregisterOutcome.NOT_FOUND

            if email not in activity.participants:
                return UnregisterOutcome.NOT_SIGNED_UP

            activity.participants.remove(email)
            logger.debug("Removed %s from %s", email, name)
            return UnregisterOutcome.SUCCESS
