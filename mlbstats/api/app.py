"""FastAPI application factory.

create_app() builds the cache backend, the MLB client, the data service and
the pre-warm scheduler once and stores them on app.state. The lifespan
starts the scheduler and closes the cache and client on shutdown.
"""

import logging
import time
import traceback
from collections.abc import Callable
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mlbstats import __version__
from mlbstats.api.routes import cache, games, health, roster, standings, teams, trends
from mlbstats.cache import CacheBackend, create_cache_backend
from mlbstats.config import Settings
from mlbstats.consumers import CacheWarmScheduler
from mlbstats.providers.mlb import MLBStatsClient
from mlbstats.services import create_data_service
from mlbstats.utilities.tz import now_utc, today_mlb

logger = logging.getLogger(__name__)


def _error_body(request: Request, exc: Exception, settings: Settings) -> dict:
    body = {
        "error": "Internal server error",
        "message": str(exc),
        "path": request.url.path,
        "method": request.method,
        "timestamp": now_utc().isoformat(),
    }
    if not settings.is_production:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def _install_handlers(app: FastAPI, settings: Settings) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s - %d - %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(request, exc, settings),
        )


def create_app(
    settings: Settings | None = None,
    cache_backend: CacheBackend | None = None,
    client: MLBStatsClient | None = None,
    today: Callable[[], date] = today_mlb,
    start_scheduler: bool | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to Settings.from_env()
        cache_backend: Defaults to the backend selected by settings
        client: Defaults to a client configured from settings
        today: Clock for "today" in MLB time
        start_scheduler: Overrides settings.scheduler_enabled
    """
    settings = settings or Settings.from_env()
    if cache_backend is None:
        cache_backend = create_cache_backend(settings)
    if client is None:
        client = MLBStatsClient.from_settings(settings)
    if start_scheduler is None:
        start_scheduler = settings.scheduler_enabled

    data_service = create_data_service(cache_backend, client, today=today)
    scheduler = CacheWarmScheduler(data_service, interval_minutes=settings.refresh_interval_minutes)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("[STARTUP] Cache backend: %s", cache_backend.cache_type)
        if start_scheduler:
            scheduler.start()
        yield
        scheduler.stop()
        cache_backend.close()
        client.close()
        logger.info("[SHUTDOWN] Closed cache and MLB client")

    app = FastAPI(title="MLB Stats API", version=__version__, lifespan=lifespan)

    app.state.settings = settings
    app.state.cache = cache_backend
    app.state.data_service = data_service
    app.state.scheduler = scheduler

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_production else settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["X-Data-Source"],
    )
    _install_handlers(app, settings)

    for module in (games, standings, roster, trends, teams, health, cache):
        app.include_router(module.router, prefix="/api")

    return app
