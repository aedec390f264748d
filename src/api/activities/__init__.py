"""
Activities API package.

Contains the routes for listing activities and managing signups.
"""

from src.api.activities.routes import router

__all__ = ["router"]
