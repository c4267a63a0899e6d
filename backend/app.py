# backend/app.py
"""
FastAPI Application Factory
===========================

Creates and configures the trade journal query API.
Uses the factory pattern so tests can inject settings, a store and a clock.
"""

from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.models.schemas import (
    AboutResponse,
    ComponentHealth,
    HealthResponse,
    HealthStatus,
    HelloResponse,
)
from backend.routers import (
    futures_options_router,
    journeys_router,
    orders_router,
)
from config.settings import Settings, get_settings
from core.clock import Clock, RealTimeClock
from core.database import DocumentStore, create_store
from core.errors import ClientInputError, StoreError
from core.logging import setup_logger

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    """Attach file/console handlers to the service's package loggers."""
    for name in ("backend", "core"):
        setup_logger(name, level=settings.log_level, log_dir=settings.log_dir)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Settings (loaded from the environment if not provided)
        store: Pre-built document store; when omitted one is created from
            settings at startup and closed at shutdown
        clock: Clock used for default date windows (UTC wall clock by default)

    Returns:
        FastAPI application instance
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting trade journal API...")
        owns_store = app.state.store is None
        if owns_store:
            app.state.store = create_store(settings)

        yield

        logger.info("Shutting down trade journal API...")
        if owns_store:
            app.state.store.close()
            app.state.store = None

    app = FastAPI(
        title="Trade Journal API",
        description="Read-only date-range and key lookups over trade journeys, orders and futures options.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.clock = clock or RealTimeClock()

    # CORS middleware - the browser frontend calls this API directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add X-Process-Time header to all responses"""
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Process-Time"] = str(time.time() - start_time)
        return response

    register_error_handlers(app)

    app.include_router(journeys_router, prefix="/api", tags=["Trade Journeys"])
    app.include_router(orders_router, prefix="/api", tags=["Orders"])
    app.include_router(futures_options_router, prefix="/api", tags=["Futures Options"])

    @app.get("/", response_model=HelloResponse, tags=["System"])
    async def root():
        return HelloResponse()

    @app.get("/about", response_model=AboutResponse, tags=["System"])
    async def about():
        return AboutResponse()

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    def health_check(request: Request):
        """
        Health check endpoint.
        Pings the document store; never fails the request itself.
        """
        store = request.app.state.store
        if store is None:
            database = ComponentHealth(status="disconnected", detail="store not initialised")
        elif store.ping():
            database = ComponentHealth(status="connected")
        else:
            database = ComponentHealth(status="error", detail="ping failed")

        status = HealthStatus.HEALTHY if database.status == "connected" else HealthStatus.DEGRADED
        return HealthResponse(status=status, components={"database": database})

    logger.info(
        f"App created (db={settings.tradedb_name}, require_date_range={settings.require_date_range}, "
        f"windows: journeys={settings.journey_window_days}d orders={settings.order_window_days}d)"
    )
    return app


def register_error_handlers(app: FastAPI):
    """Map service errors to JSON {"error": ...} responses"""

    @app.exception_handler(ClientInputError)
    async def client_input_error_handler(request: Request, exc: ClientInputError):
        logger.info(f"Rejected {request.url.path}: {exc}")
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions"""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

