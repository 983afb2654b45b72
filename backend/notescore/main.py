"""
NoteScore Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       holding its own NoteService and ScoreService on app.state.
Who:   uvicorn imports `notescore.main:app`; tests call create_app() directly.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │  Req ID      │→│Rate Limit│→│  Logging        │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes (prefix /api/v1):                           │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /notes       │ │ /score       │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ InvalidRef→400│  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notescore import __version__
from notescore.config import settings
from notescore.exceptions import (
    InvalidReferenceError,
    NoteScoreError,
    NotFoundError,
)
from notescore.middleware.logging import RequestLoggingMiddleware
from notescore.middleware.rate_limit import RateLimitMiddleware
from notescore.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from notescore.routes import health, notes, score
from notescore.services.note_service import NoteService
from notescore.services.score_service import ScoreService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Root logger to stdout at settings.log_level, one consistent format.
    When:    Called once during app startup (before anything else logs).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware writes the access lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("faker").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("NoteScore Backend starting up...")
    logger.info(
        "Collections ready: %d notes, %d scores",
        app.state.note_service.count(),
        app.state.score_service.count(),
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # Collections are in memory only; nothing to flush
    logger.info("NoteScore Backend shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The catch-all handler runs outside the middleware stack, after the
    # ContextVar has been reset, so request.state is checked first.
    return (
        getattr(request.state, "request_id", None)
        or request.headers.get(REQUEST_ID_HEADER)
        or request_id_var.get("")
    )


def _error_body(request: Request, error: str, message: str, details=None) -> dict:
    body = {"error": error, "message": message, "request_id": _request_id(request)}
    if details is not None:
        body["details"] = details
    return body


def _format_location(loc) -> str:
    # ("query", "query") → "query.query"; ("body", "score") → "body.score"
    return ".".join(str(part) for part in loc)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (schema violation, FastAPI's 422 replaced)
        NotFoundError           → 404 Not Found        {"message": "NotFound"}
        InvalidReferenceError   → 400 Bad Request      {"message": "Score does not exist"}
        (429 is answered by RateLimitMiddleware itself)
        NoteScoreError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Exception handlers never expose stack traces in the response body; those
    are logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Request failed the declared query/path/body schema."""
        details = [
            {"loc": _format_location(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
        message = (
            f"{details[0]['loc']}: {details[0]['msg']}" if details else "Invalid request"
        )
        logger.info("[%s] Request validation failed: %s", _request_id(request), message)
        return JSONResponse(
            status_code=400,
            content=_error_body(request, "validation_error", message, details),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(request, "not_found", exc.message))

    @app.exception_handler(InvalidReferenceError)
    async def handle_invalid_reference(request: Request, exc: InvalidReferenceError):
        return JSONResponse(
            status_code=400,
            content=_error_body(request, "invalid_reference", exc.message),
        )

    @app.exception_handler(NoteScoreError)
    async def handle_app_error(request: Request, exc: NoteScoreError):
        logger.error(
            "[%s] Unhandled application error: %s | Context: %s",
            _request_id(request),
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request, "server_error", "An internal error occurred. Please try again later."
            ),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 body, full stack trace in the server log."""
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                request,
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
            headers={REQUEST_ID_HEADER: _request_id(request)},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    note_service: Optional[NoteService] = None,
    score_service: Optional[ScoreService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        note_service:  Service to serve /notes from. None creates one seeded
                       with the default note.
        score_service: Service to serve /score from. None creates one seeded
                       with synthetic rows (see settings.score_seed_count).

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "In-memory notes and scored notes with search, "
            "create, update and delete endpoints."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Set here rather than in lifespan: ASGI test transports skip lifespan events
    app.state.started_at = time.time()
    app.state.note_service = note_service if note_service is not None else NoteService()
    app.state.score_service = score_service if score_service is not None else ScoreService()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → RateLimit → Logging → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=settings.cors_methods_list,
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Retry-After"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)
    # Outermost, so 429 bodies and headers carry the request ID too
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router, prefix=settings.api_prefix)
    app.include_router(score.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    uvicorn.run(
        "notescore.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `notescore.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
