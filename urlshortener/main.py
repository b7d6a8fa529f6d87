"""URL Shortener Service - Main FastAPI Application.

A simple URL shortening service with:
- Create short URLs (reusing the short URL of an already known long URL)
- Redirect to original URLs while counting clicks
- Per-URL statistics
- Listing of all URLs
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.middleware import log_requests
from .api.routes import index_router, urls_router
from .api.routes.index import AVAILABLE_ROUTES
from .core.config import Settings, get_settings
from .core.database import Database
from .core.exceptions import InvalidURLError, NotFoundError, StorageError
from .core.store import UrlStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message, **extra},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info(f"Starting {app.title}...")
    app.state.store.init_db()
    logger.info("Database initialized")
    yield
    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    app.state.store.close()


async def invalid_url_handler(request: Request, exc: InvalidURLError):
    return error_response(400, exc.message)


async def not_found_handler(request: Request, exc: NotFoundError):
    return error_response(404, exc.message)


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return error_response(500, "Internal server error")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return error_response(
            404,
            f"Route {request.method} {request.url.path} not found",
            availableRoutes=AVAILABLE_ROUTES,
        )
    return error_response(exc.status_code, str(exc.detail))


async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.error(f"Unhandled Exception: {exc}")
    return error_response(500, "Internal server error")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[UrlStore] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings. Defaults to the environment settings.
        store: Record store. Defaults to a sqlite Database at settings.db_path.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else Database(settings.db_path)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(InvalidURLError, invalid_url_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include routers
    app.include_router(index_router)
    app.include_router(urls_router)
    return app


app = create_app()
