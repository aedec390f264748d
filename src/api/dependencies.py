"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.mail.console import ConsoleConfirmationSender
from src.adapters.repository.memory import InMemoryActivityRepository
from src.domain.activities import ActivityService

# Module-level singleton - ConsoleConfirmationSender is stateless
_confirmation_sender = ConsoleConfirmationSender()


def get_repository(request: Request) -> InMemoryActivityRepository:
    """
    Get activity repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_confirmation_sender() -> ConsoleConfirmationSender:
    """Get console confirmation sender (singleton)."""
    return _confirmation_sender


def get_activity_service(request: Request) -> ActivityService:
    """
    Create activity service with injected dependencies.

    Wires together the repository and confirmation sender for the domain service.
    """
    repository = get_repository(request)
    confirmation_sender = get_confirmation_sender()
    return ActivityService(repository=repository, confirmation_sender=confirmation_sender)
