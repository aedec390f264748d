"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


@dataclass
class Activity:
    """
    Extracurricular activity record.

    The name is the directory key and never changes after creation.
    Participants keep signup order for display.
    """

    name: str
    description: str
    schedule: str
    max_participants: int
    participants: list[str] = field(default_factory=list)

    @property
    def spots_left(self) -> int:
        return self.max_participants - len(self.participants)


class SignupOutcome(Enum):
    """
    Result of an atomic signup attempt.

    Returned by the repository so the check and the mutation
    happen under the same lock.
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ALREADY_SIGNED_UP = "already_signed_up"
    FULL = "full"


class UnregisterOutcome(Enum):
    """Result of an atomic unregister attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    NOT_SIGNED_UP = "not_signed_up"


class ActivityRepository(Protocol):
    """Port interface for the activity directory."""

    def list_activities(self) -> dict[str, Activity]:
        """
        Return a consistent snapshot of every activity.

        Returned records are copies; mutating them does not touch
        directory state.
        """
        ...

    def get_activity(self, name: str) -> Activity | None:
        """Return a snapshot of one activity, or None if unknown."""
        ...

    def add_participant(self, name: str, email: str) -> SignupOutcome:
        """
        Atomically add an email to an activity.

        Checks (in order): activity exists, email not present,
        capacity not reached.

        Args:
            name: Activity name (exact match)
            email: Normalized email address

        Returns:
            SignupOutcome indicating success or the failed check
        """
        ...

    def remove_participant(self, name: str, email: str) -> UnregisterOutcome:
        """
        Atomically remove an email from an activity.

        Args:
            name: Activity name (exact match)
            email: Normalized email address

        Returns:
            UnregisterOutcome indicating success or the failed check
        """
        ...


class ConfirmationSender(Protocol):
    """Port interface for participant notifications."""

    def send_signup_confirmation(self, email: str, activity_name: str) -> None:
        """Notify a participant that they joined an activity."""
        ...

    def send_unregister_notice(self, email: str, activity_name: str) -> None:
        """Notify a participant that they left an activity."""
        ...
