"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request

from src.adapters.repository.memory import InMemoryActivityRepository
from src.adapters.repository.seed import load_seed
from src.api.activities import router as activities_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "activities",
        "description": "Extracurricular activities - list activities, sign up and unregister students",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Applies the configured log level
    - Loads seed activities and creates the directory on startup
    - Drops the directory on shutdown
    """
    settings = get_settings()
    logging.getLogger("src").setLevel(settings.log_level.upper())

    logger.info("Starting application...")

    seed_path = Path(settings.seed_file) if settings.seed_file else None
    activities = load_seed(seed_path)
    repository = InMemoryActivityRepository(activities)

    # Store repository in app state for dependency injection
    app.state.repository = repository

    logger.info("Loaded %d activities", len(repository))
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    del app.state.repository


app = FastAPI(
    title="Mergington High School API",
    description="API for viewing and signing up for extracurricular activities",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(activities_router, prefix=get_settings().api_prefix)


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint with directory validation.

    Returns 200 OK with the number of loaded activities.
    """
    repository = request.app.state.repository
    return {"status": "healthy", "activities": len(repository)}
