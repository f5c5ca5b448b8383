"""FastAPI application for the cadence-lift JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import get_db_path, init_db, seed_exercises
from ..db.repositories import ExerciseRepository
from ..errors import (
    CadenceLiftError,
    InvalidFeedback,
    NoEligibleExercises,
    ProfileNotFound,
    SessionNotFound,
)
from .routers import exercises, profiles, sessions

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ProfileNotFound: 404,
    SessionNotFound: 404,
    InvalidFeedback: 422,
    NoEligibleExercises: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: make sure the schema and catalog exist
    db_path = get_db_path()
    await init_db(db_path)
    if await ExerciseRepository(db_path).count() == 0:
        created, _ = await seed_exercises(db_path)
        logger.info("Seeded %d exercises", created)
    yield


async def handle_domain_error(request: Request, exc: CadenceLiftError) -> JSONResponse:
    """Map domain errors to JSON error bodies."""
    status_code = ERROR_STATUS.get(type(exc), 400)
    content = {"error": type(exc).__name__, "detail": str(exc)}
    if isinstance(exc, InvalidFeedback):
        content["field"] = exc.field
    return JSONResponse(status_code=status_code, content=content)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="cadence-lift",
        description="Adaptive home workout generator",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(CadenceLiftError, handle_domain_error)

    # Include routers
    app.include_router(profiles.router)
    app.include_router(exercises.router)
    app.include_router(sessions.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
