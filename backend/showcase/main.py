"""
Showcase Backend - FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires middleware, exception handlers, routers and the
       lifespan; an already-built DocumentStore may be injected (tests).
Who:   uvicorn (`uvicorn showcase.main:app`) and the test suite.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                   FastAPI App                        │
    │                                                      │
    │  Middleware:  Request ID → Logging → GZip → CORS     │
    │                                                      │
    │  Routes:                                             │
    │    /add-artwork  /artworks[...]  /my-artworks        │
    │    /artist/{email}/artworks  /favorites[...]         │
    │    /  /health                                        │
    │                                                      │
    │  Exception Handlers:                                 │
    │    InvalidIdentifier→400  NotFound→404               │
    │    StoreUnavailable→503   Database→500               │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   logging, config check, Mongo client (unless injected)
    Shutdown:  close the Mongo client this process opened
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from showcase import __version__
from showcase.config import settings
from showcase.database import DocumentStore
from showcase.exceptions import (
    DatabaseError,
    InvalidIdentifierError,
    NotFoundError,
    ShowcaseError,
    StoreUnavailableError,
)
from showcase.middleware.logging import RequestLoggingMiddleware
from showcase.middleware.request_id import RequestIDMiddleware, request_id_var
from showcase.routes import artworks, favorites, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, at startup.

    Format: 2025-01-15T12:00:00 [INFO] showcase.access: GET /artworks 200 3.1ms [1f3a9c0e] from 10.0.0.7
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Showcase Backend %s starting up...", __version__)

    owns_store = app.state.store is None
    if owns_store:
        try:
            settings.validate_required_for_production()
        except ValueError as e:
            # Keep serving: /health and every store route will report 503.
            logger.error("Configuration error: %s", str(e))

        try:
            app.state.store = DocumentStore.from_settings(settings)
        except PyMongoError as e:
            logger.error("Could not create the MongoDB client: %s", str(e))
        else:
            logger.info(
                "Document store configured: database=%s collections=%s,%s",
                settings.database_name,
                settings.artworks_collection,
                settings.favorites_collection,
            )

    logger.info("Server is running on http://%s:%d", settings.backend_host, settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Showcase Backend shutting down...")
    if owns_store and app.state.store is not None:
        await app.state.store.close()
        app.state.store = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes.

        InvalidIdentifierError  → 400
        NotFoundError           → 404
        StoreUnavailableError   → 503
        DatabaseError           → 500 (generic message)
        ShowcaseError (base)    → 500
        Exception (fallback)    → 500 (traceback logged)
    """

    @app.exception_handler(InvalidIdentifierError)
    async def handle_invalid_identifier(request: Request, exc: InvalidIdentifierError):
        logger.warning("[%s] Invalid identifier: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "invalid_identifier", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
        logger.error("[%s] Store unavailable: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        response = _error_response(503, "service_unavailable", exc.message)
        response.headers["Retry-After"] = "30"
        return response

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", "An internal error occurred. Please try again later.")

    @app.exception_handler(ShowcaseError)
    async def handle_showcase_error(request: Request, exc: ShowcaseError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=exc,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: a ready DocumentStore (or compatible fake). When omitted, the
               lifespan connects to MongoDB using `settings` and closes the
               client on shutdown.
    """
    app = FastAPI(
        title="Art Showcase API",
        description="Artworks, likes and favorites for the art showcase gallery.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    # Added innermost first; RequestIDMiddleware ends up outermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(artworks.router)
    app.include_router(favorites.router)
    app.include_router(health.router)

    return app


app = create_app()
