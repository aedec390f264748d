"""
Activity domain service - Signup and unregister flows.

This module contains the core business logic for extracurricular
activity membership.

Membership (per activity, email pair)
=====================================

States:
- NOT REGISTERED: email absent from the participant list
- REGISTERED: email present in the participant list

Valid Transitions:
    NOT REGISTERED -> REGISTERED   (signup, activity below capacity)
    REGISTERED -> NOT REGISTERED   (unregister)

Rejected Transitions:
    REGISTERED -> REGISTERED          (duplicate signup -> AlreadySignedUp)
    NOT REGISTERED -> NOT REGISTERED  (absent unregister -> NotSignedUp)

Note: Each check-and-mutate runs atomically inside the repository, so two
concurrent signups can never both take the last seat.
"""

from dataclasses import dataclass

from .exceptions import ActivityFull, ActivityNotFound, AlreadySignedUp, NotSignedUp
from .ports import (
    Activity,
    ActivityRepository,
    ConfirmationSender,
    SignupOutcome,
    UnregisterOutcome,
)


@dataclass
class ActivityService:
    """
    Domain service for activity signups.

    Orchestrates email normalization, atomic membership changes
    and participant notification.
    """

    repository: ActivityRepository
    confirmation_sender: ConfirmationSender

    def list_activities(self) -> dict[str, Activity]:
        """Return a snapshot of the whole directory."""
        return self.repository.list_activities()

    def get_activity(self, name: str) -> Activity:
        """
        Return a snapshot of one activity.

        Raises:
            ActivityNotFound: If no activity has this name
        """
        activity = self.repository.get_activity(name)
        if activity is None:
            raise ActivityNotFound(name)
        return activity

    def signup(self, name: str, email: str) -> str:
        """
        Sign a participant up for an activity.

        Args:
            name: Activity name
            email: Participant email (surrounding whitespace is stripped)

        Returns:
            Confirmation message

        Raises:
            ActivityNotFound: If the activity does not exist
            AlreadySignedUp: If the email is already a participant
            ActivityFull: If the activity is at capacity
        """
        normalized_email = self._normalize_email(email)
        outcome = self.repository.add_participant(name, normalized_email)

        if outcome == SignupOutcome.NOT_FOUND:
            raise ActivityNotFound(name)
        if outcome == SignupOutcome.ALREADY_SIGNED_UP:
            raise AlreadySignedUp(normalized_email)
        if outcome == SignupOutcome.FULL:
            raise ActivityFull(name)

        self.confirmation_sender.send_signup_confirmation(normalized_email, name)
        return f"Signed up {normalized_email} for {name}"

    def unregister(self, name: str, email: str) -> str:
        """
        Remove a participant from an activity.

        Args:
            name: Activity name
            email: Participant email (surrounding whitespace is stripped)

        Returns:
            Confirmation message

        Raises:
            ActivityNotFound: If the activity does not exist
            NotSignedUp: If the email is not a participant
        """
        normalized_email = self._normalize_email(email)
        outcome = self.repository.remove_participant(name, normalized_email)

        if outcome == UnregisterOutcome.NOT_FOUND:
            raise ActivityNotFound(name)
        if outcome == UnregisterOutcome.NOT_SIGNED_UP:
            raise NotSignedUp(normalized_email)

        self.confirmation_sender.send_unregister_notice(normalized_email, name)
        return f"Unregistered {normalized_email} from {name}"

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip surrounding whitespace. Case is kept as submitted.
        """
        return email.strip()
