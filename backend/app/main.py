"""
backend/app/main.py

Purpose:
    FastAPI application bootstrap: logging, middleware/router wiring,
    exception handlers, and one-time competition catalog loading.

Dependencies:
    - app.config
    - app.middleware.logging
    - app.routers.feed
    - app.services.competition_catalog_service
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.middleware.logging import StructuredLoggingMiddleware, setup_logging
from app.models.competitions import CompetitionCatalog
from app.routers.feed import router as feed_router
from app.services.competition_catalog_service import load_catalog

logger = logging.getLogger("matchfeed")


def create_app(catalog: CompetitionCatalog | None = None) -> FastAPI:
    """Build the app; without an explicit catalog the static one is loaded on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        if getattr(app.state, "catalog", None) is None:
            app.state.catalog = load_catalog()
        loaded: CompetitionCatalog = app.state.catalog
        if loaded.rejected:
            logger.warning("Catalog started with %d rejected definitions", len(loaded.rejected))
        logger.info("Match feed ready with %d competitions", len(loaded.competitions))
        yield

    app = FastAPI(
        title="Match Feed",
        description="Competition season windows and match significance ranking",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(StructuredLoggingMiddleware)

    app.include_router(feed_router)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Return clean validation errors without leaking internal field paths."""
        errors = []
        for err in exc.errors():
            loc = err.get("loc", ())
            # Strip the "body" / "query" prefix for cleaner messages
            field = ".".join(str(part) for part in loc[1:]) if len(loc) > 1 else str(loc[-1]) if loc else "unknown"
            errors.append({"field": field, "message": err.get("msg", "Invalid value.")})
        return JSONResponse(status_code=422, content={"detail": "Validation error.", "errors": errors})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning("ValueError on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": "Invalid input."})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """Catch-all: log the real error, return a safe generic message."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "An internal error occurred."})

    @app.get("/health")
    async def health():
        loaded = getattr(app.state, "catalog", None)
        return {
            "status": "healthy" if loaded is not None and loaded.competitions else "degraded",
            "competitions": len(loaded.competitions) if loaded is not None else 0,
            "rejected": len(loaded.rejected) if loaded is not None else 0,
        }

    return app


app = create_app()
