"""
Domain exceptions - Semantic error types for activity signups.

This module defines domain-specific exceptions that communicate
business rule violations without leaking HTTP details.
"""


class ActivityError(Exception):
    """Base class for activity domain errors."""

    pass


class ActivityNotFound(ActivityError):
    """No activity with the requested name exists."""

    pass


class AlreadySignedUp(ActivityError):
    """Email is already a participant of the activity."""

    pass


class NotSignedUp(ActivityError):
    """Email is not a participant of the activity."""

    pass


class ActivityFull(ActivityError):
    """Activity has reached max_participants."""

    pass
