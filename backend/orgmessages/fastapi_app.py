"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.

Endpoints:
- /api/v1/organizations/{organization_id}/messages
- / and /health
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from orgmessages import __version__
from orgmessages.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from orgmessages.config.settings import Config
from orgmessages.presentation.api import messages_router
from orgmessages.setup.ioc import create_container

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_ID_HEADER, NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka already set up by the factory
    - Shutdown: close DI container (disconnects Prisma when used)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use. Built from Config.MESSAGE_STORE when None.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    app = FastAPI(
        title="Organization Messages API",
        description="CRUD API for organization-scoped messages",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Validation error handler - malformed bodies and non-UUID path params
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"[VALIDATION ERROR] {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler - repository failures end up here
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": f"Internal server error: {str(exc)}"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(messages_router)

    return app


# Create the app instance
app = create_fastapi_app()
