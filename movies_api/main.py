"""Movies API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MoviesApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The MovieStore is created on startup by the lifespan, attached to app.state,
      and released on shutdown; no module-level store exists

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_api.api.error_handlers import register_error_handlers
from movies_api.api.routes import health, movies
from movies_api.config import get_settings
from movies_api.core.movie_store import MovieStore
from movies_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.movie_store = MovieStore()
    logger.info("Movies API started")
    yield
    logger.info(
        f"Movies API shutting down ({len(app.state.movie_store)} movies in memory)",
    )
    app.state.movie_store = None


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(movies.router)

register_error_handlers(app)
