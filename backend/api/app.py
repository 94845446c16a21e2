"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import ServiceError, validation_error
from shared.models import FieldError
from .dependencies import get_container
from .routes import health
from modules.users.routes import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    users = get_container().user_repository.count()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port} with {users} users")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def handle_service_error(_: Request, exc: ServiceError) -> JSONResponse:
    """Render a taxonomy error as its structured error value."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI's request parsing failures as a VALIDATION_ERROR."""
    field_errors = [
        FieldError(
            field=str(error["loc"][-1]) if error.get("loc") else "",
            message=error.get("msg", "Invalid value"),
            code=error.get("type", "INVALID_VALUE"),
        )
        for error in exc.errors()
    ]
    return await handle_service_error(request, validation_error("Validation failed", field_errors))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory user directory with search and pagination",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Map taxonomy errors to their HTTP status
    app.add_exception_handler(ServiceError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
