"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pantry_pilot.api.admin import router as admin_router
from pantry_pilot.api.auth import router as auth_router
from pantry_pilot.api.items import router as items_router
from pantry_pilot.api.meals import router as meals_router
from pantry_pilot.api.responses import failure, success
from pantry_pilot.app_logging import configure_logging
from pantry_pilot.config import parse_allowed_origins
from pantry_pilot.containers import AppContainer
from pantry_pilot.domain.errors import PantryPilotError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_allowed_origins(container.settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(auth_router)
    app.include_router(items_router)
    app.include_router(meals_router)
    app.include_router(admin_router)

    @app.exception_handler(PantryPilotError)
    async def handle_domain_error(
        request: Request, exc: PantryPilotError
    ) -> JSONResponse:
        if exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": exc.message},
            )
        return failure(exc.message, exc.http_status)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return failure(_describe_validation(exc), status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return failure(f"Cannot {request.method} {request.url.path}", 404)
        return failure(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return failure("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Simple health check endpoint."""
        return success({"status": "ok"})

    return app


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message
