"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.
"""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from message_api import __version__
from message_api.config.logging_config import (
    DEFAULT_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from message_api.config.settings import Config
from message_api.setup.ioc import create_container
from message_api.presentation.api import messages_router
from message_api.presentation.api.responses import ErrorDetail, envelope_response

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", DEFAULT_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka are already set up by the factory
    - Shutdown: close the DI container
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; a fresh one is created when omitted

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    app = FastAPI(
        title=Config.APP_NAME,
        description="Organization-scoped message management API",
        version=__version__,
        lifespan=lifespan,
    )

    # Dishka adds middleware, so it must be set up before the app starts
    setup_dishka(container or create_container(), app)

    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed path ids and bodies
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ]
        logger.warning(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return envelope_response(
            status.HTTP_400_BAD_REQUEST, "Validation error", errors=errors
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return envelope_response(exc.status_code, str(exc.detail))

    # Anything a repository raises ends up here
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}", exc_info=exc)
        detail = ErrorDetail(
            code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            description=str(exc) or "Something went wrong",
            message=str(exc),
            more_info="".join(traceback.format_exception(exc)) if Config.DEBUG else None,
        )
        response = envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Exception occurs while processing request for {request.method} {request.url.path}.",
            errors=[detail],
        )
        # Sent from outside the user middleware stack, so stamp the id here
        response.headers["X-Correlation-ID"] = request.headers.get(
            "X-Correlation-ID", correlation_id_var.get()
        )
        return response

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(messages_router)

    return app
