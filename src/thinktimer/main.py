from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.middleware.base import RequestResponseEndpoint

from src.thinktimer.api.v1.router import api_router
from src.thinktimer.core.config import get_settings
from src.thinktimer.core.db import dispose_engine, ensure_schema, get_engine, get_session
from src.thinktimer.core.exceptions import setup_exception_handlers
from src.thinktimer.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - schema on startup, engine disposal on shutdown.

    A schema failure propagates and aborts startup; there is no degraded mode.
    """
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    added = await ensure_schema(get_engine())
    logger.info("Schema ready", added_columns=added)

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Project management"},
    {"name": "time-blocks", "description": "Time blocks and running timers"},
    {"name": "settings", "description": "User settings singleton"},
    {"name": "system", "description": "OS integration helpers"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Personal time tracking backend",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)

    # Add correlation ID middleware first (outermost middleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id to log context for all requests."""
        clear_request_context()
        bind_request_context(correlation_id.get())
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check against the store."""
        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": f"unhealthy: {e}"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


def run() -> None:
    """Console entry point: serve the API for the desktop shell."""
    settings = get_settings()
    uvicorn.run(
        "src.thinktimer.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
