"""FastAPI application entrypoint and router wiring for the backend."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.auth import router as auth_router
from taskboard.api.boards import router as boards_router
from taskboard.api.tasks import router as tasks_router
from taskboard.core.config import settings
from taskboard.core.error_handling import install_error_handling
from taskboard.core.logging import configure_logging, get_logger
from taskboard.db.store import get_datastore
from taskboard.schemas.health import HealthStatusResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

configure_logging()
logger = get_logger(__name__)
OPENAPI_TAGS = [
    {
        "name": "auth",
        "description": "Registration, login/logout, and session identity endpoints.",
    },
    {
        "name": "health",
        "description": "Service liveness/readiness probes used by infrastructure checks.",
    },
    {
        "name": "boards",
        "description": "Board listing, creation, rename, and cascading delete.",
    },
    {
        "name": "tasks",
        "description": "Task CRUD, status changes, and drag-and-drop reordering.",
    },
]


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI) -> AsyncIterator[None]:
    """Make sure the datastore file exists before serving requests."""
    logger.info(
        "app.lifecycle.starting environment=%s data_file=%s",
        settings.environment,
        settings.data_file,
    )
    store_factory = fastapi_app.dependency_overrides.get(get_datastore, get_datastore)
    store_factory().load()
    logger.info("app.lifecycle.started")
    try:
        yield
    finally:
        logger.info("app.lifecycle.stopped")


def _health_routes() -> APIRouter:
    router = APIRouter(tags=["health"])
    ok_response = {
        status.HTTP_200_OK: {
            "description": "Service is alive.",
            "content": {"application/json": {"example": {"ok": True}}},
        },
    }

    @router.get(
        "/health",
        response_model=HealthStatusResponse,
        summary="Health Check",
        responses=ok_response,
    )
    def health() -> HealthStatusResponse:
        """Lightweight liveness probe endpoint."""
        return HealthStatusResponse(ok=True)

    @router.get(
        "/healthz",
        response_model=HealthStatusResponse,
        summary="Health Alias Check",
        responses=ok_response,
    )
    def healthz() -> HealthStatusResponse:
        """Alias liveness probe endpoint for platform compatibility."""
        return HealthStatusResponse(ok=True)

    @router.get(
        "/readyz",
        response_model=HealthStatusResponse,
        summary="Readiness Check",
        responses=ok_response,
    )
    def readyz() -> HealthStatusResponse:
        """Readiness probe endpoint for service orchestration checks."""
        return HealthStatusResponse(ok=True)

    return router


def create_app() -> FastAPI:
    """Build the application with middleware, error handling, and all routers."""
    fastapi_app = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    if origins:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        logger.info("app.cors.enabled origins_count=%s", len(origins))
    else:
        logger.info("app.cors.disabled")

    install_error_handling(fastapi_app)
    fastapi_app.include_router(_health_routes())

    api = APIRouter(prefix="/api")
    api.include_router(auth_router)
    api.include_router(boards_router)
    api.include_router(tasks_router)
    fastapi_app.include_router(api)
    logger.debug("app.routes.registered count=%s", len(fastapi_app.routes))
    return fastapi_app


app = create_app()
