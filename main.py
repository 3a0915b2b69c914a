"""
SOLID Principles lessons FastAPI application
Main entry point: logging, middleware, exception handlers and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import health, lessons, principles
from api.dependencies import get_lesson_repository
from app.config import Settings, settings
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_exception_handler,
    general_exception_handler,
)
from app.exceptions import AppError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("solid.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Builds the lesson catalog up front so a broken lesson fails at startup.
    """
    app_settings: Settings = app.state.settings
    _logger.info(f"Starting {app_settings.app_name} in {app_settings.environment.value} mode")
    repo = get_lesson_repository()
    _logger.info(f"Lesson catalog loaded lessons={repo.count()}")
    try:
        yield
    finally:
        _logger.info(f"Shutting down {app_settings.app_name}")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application; docs are only served outside production."""
    prefix = app_settings.api_prefix
    docs_enabled = not app_settings.is_production()

    application = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=lifespan,
        debug=app_settings.debug,
        openapi_url=f"{prefix}/openapi.json" if docs_enabled else None,
        docs_url=f"{prefix}/docs" if docs_enabled else None,
        redoc_url=f"{prefix}/redoc" if docs_enabled else None,
    )
    application.state.settings = app_settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(AppError, app_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    application.include_router(health.router, prefix=prefix)
    application.include_router(principles.router, prefix=prefix)
    application.include_router(lessons.router, prefix=prefix)
    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
