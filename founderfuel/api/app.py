"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging, opens a single SQLite connection
(shared across all requests via ``request.app.state.db``) and initialises
the schema.  On shutdown it closes the connection cleanly.

Routers
-------
All pipeline endpoints are mounted under ``/api``:

    /api/scrape, /api/history                 — page extraction
    /api/analyze, /api/analyses               — landing-page critique
    /api/repurpose, /api/repurpose/history    — content repurposing

``/health`` answers without touching the database.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from founderfuel.config import settings
from founderfuel.db import get_connection, init_db
from founderfuel.log import setup_logging

from founderfuel.api.errors import register_error_handlers
from founderfuel.api.routers import analysis as analysis_router
from founderfuel.api.routers import repurpose as repurpose_router
from founderfuel.api.routers import scrape as scrape_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the DB on startup and close it on shutdown."""
    setup_logging(settings.log_level)
    conn = get_connection()
    init_db(conn)
    app.state.db = conn
    try:
        yield
    finally:
        conn.close()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="FounderFuel API",
        description=(
            "Scrapes a URL, extracts its readable content and asks an LLM "
            "either to score it as a landing page or to repurpose it into "
            "social and newsletter copy.  Every result is stored and listable."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(scrape_router.router, prefix="/api", tags=["scrape"])
    app.include_router(analysis_router.router, prefix="/api", tags=["analysis"])
    app.include_router(repurpose_router.router, prefix="/api", tags=["repurpose"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, Any]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


# Module-level instance used by uvicorn:
#   uvicorn founderfuel.api.app:app --reload
app = create_app()
