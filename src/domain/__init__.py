"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for extracurricular
activity signups. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .activities import ActivityService
from .exceptions import (
    ActivityError,
    ActivityFull,
    ActivityNotFound,
    AlreadySignedUp,
    NotSignedUp,
)
from .ports import (
    Activity,
    ActivityRepository,
    ConfirmationSender,
    SignupOutcome,
    UnregisterOutcome,
)

__all__ = [
    "Activity",
    "ActivityError",
    "ActivityFull",
    "ActivityNotFound",
    "ActivityRepository",
    "ActivityService",
    "AlreadySignedUp",
    "ConfirmationSender",
    "NotSignedUp",
    "SignupOutcome",
    "UnregisterOutcome",
]
