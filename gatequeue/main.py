"""Gate Queue API — FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gatequeue.core.config import settings
from gatequeue.core.exceptions import register_exception_handlers
from gatequeue.middleware.request_log import RequestLogMiddleware
from gatequeue.schemas.common import HealthResponse

# v1 routers
from gatequeue.routers.v1.checkin import router as checkin_v1_router
from gatequeue.routers.v1.drivers import router as drivers_v1_router
from gatequeue.routers.v1.gates import router as gates_v1_router
from gatequeue.routers.v1.logs import router as logs_v1_router
from gatequeue.routers.v1.store import router as store_v1_router


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    for router in (
        drivers_v1_router,
        gates_v1_router,
        checkin_v1_router,
        logs_v1_router,
        store_v1_router,
    ):
        app.include_router(router, prefix="/api/v1")

    # --- Stored delivery-order photos ---
    app.mount(
        settings.document_base_url,
        StaticFiles(directory=settings.document_dir, check_dir=False),
        name="documents",
    )

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()
