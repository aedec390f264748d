"""
Console confirmation sender adapter - Implements ConfirmationSender protocol.

This module provides a console-based implementation of the domain's
confirmation sender port, logging membership changes for demo purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleConfirmationSender:
    """
    Implements ConfirmationSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def send_signup_confirmation(self, email: str, activity_name: str) -> None:
        """
        Log a signup confirmation (simulates email delivery).

        Args:
            email: Participant email address (normalized by domain layer)
            activity_name: Activity the participant joined
        """
        logger.info("[SIGNUP] Email: %s Activity: %s", email, activity_name)

    def send_unregister_notice(self, email: str, activity_name: str) -> None:
        """Log an unregister notice (simulates email delivery)."""
        logger.info("[UNREGISTER] Email: %s Activity: %s", email, activity_name)
