"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.dependencies import cleanup_dependencies
from src.api.middleware.timeout import TimeoutMiddleware
from src.api.routes import calendar, events, events_extract, health, settings_route
from src.api.routes.health import VERSION
from src.calendar.service import CalendarError
from src.config.settings import get_settings
from src.observability.logging import bind_context, clear_context

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Smart Calendar API starting up")

    yield

    logger.info("Smart Calendar API shutting down")
    cleanup_dependencies()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    openapi_tags = [
        {"name": "health", "description": "Service health checks"},
        {"name": "events-extract", "description": "Text-to-event extraction playground"},
        {"name": "events", "description": "Calendar events created from free text"},
        {"name": "calendar", "description": "Month grid views"},
        {"name": "settings", "description": "User preferences"},
    ]

    app = FastAPI(
        title="Smart Calendar API",
        description="""
API for turning free-form text into calendar events.

## Extraction

Text such as "Urgent meeting with Sarah tomorrow at noon #work" is parsed
into date, time, location, priority, recurrence, category, tags and title
by a fixed set of pattern rules. Input without a recognisable date is
rejected when creating events.

## Authentication

Requires `X-API-KEY` header for all requests except `/health` when
`API_KEYS` is configured.
        """,
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=openapi_tags,
    )

    # Add CORS middleware (origins from CORS_ORIGINS env var, comma-separated)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    if settings.request_timeout_seconds > 0:
        app.add_middleware(
            TimeoutMiddleware,
            timeout_seconds=settings.request_timeout_seconds,
        )

    # Request logging and correlation ID middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        bind_context(request_id=request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            clear_context()

    # Rate limiting (opt-in via RATE_LIMIT_ENABLED=true)
    if settings.rate_limit_enabled:
        from slowapi import _rate_limit_exceeded_handler
        from slowapi.errors import RateLimitExceeded

        from src.api.rate_limit import limiter

        app.state.limiter = limiter
        app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(CalendarError)
    async def calendar_exception_handler(request: Request, exc: CalendarError):
        logger.warning("Calendar error", error=str(exc), error_type=type(exc).__name__)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "error_type": "calendar"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error_type": "internal"},
        )

    # Include routers (extract before events so /events/extract is not an id)
    app.include_router(health.router, tags=["health"])
    app.include_router(events_extract.router, tags=["events-extract"])
    app.include_router(events.router, tags=["events"])
    app.include_router(calendar.router, tags=["calendar"])
    app.include_router(settings_route.router, tags=["settings"])

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": "Smart Calendar API",
            "version": VERSION,
            "docs": "/docs",
        }

    return app
