"""Conquered Peaks API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PeaksError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and the in-memory catalog initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Catalog lives for the process only; a restart starts empty

Run with: uvicorn peaks.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from peaks.api.error_handlers import register_error_handlers
from peaks.api.routes import health, peaks
from peaks.config import get_settings
from peaks.infrastructure.observability import setup_logging
from peaks.infrastructure.peak_repository import init_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_repository()
    logger.info("Conquered Peaks API started")
    yield
    logger.info("Conquered Peaks API shutting down")


app = FastAPI(
    title="Conquered Peaks API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(peaks.router)

register_error_handlers(app)
