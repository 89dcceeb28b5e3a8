"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests import the module-level `app` and override get_db

2. Middleware Stack (outermost first)
   - Path normalization: /api paths are lowercased, trailing "/" dropped
   - CORS: allow the UI origins
   - Rate limiting: slowapi default limit on every route

3. Exception Handlers
   - Request validation errors → 400 with field errors
   - ValidationFailed (from services) → 400 with field errors
   - Database and unexpected errors → 500 with a fixed message,
     full traceback in the log
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from bookstore import __version__
from bookstore.config import get_settings
from bookstore.database import ping
from bookstore.middleware import NormalizeApiPathMiddleware
from bookstore.routers import authors_router, books_router, users_router
from bookstore.routers.errors import INTERNAL_ERROR_MESSAGE, ValidationFailed
from bookstore.services.rate_limiter import limiter, rate_limit_exceeded_handler
from bookstore.validation import FieldError, field_errors_from_pydantic

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Code before yield runs on startup, code after yield on shutdown.

    Schema creation is left to Alembic (alembic upgrade head).
    """
    logger.info(f"Starting {settings.app_name} {__version__}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def validation_response(message: str, errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": message,
            "errors": [error.model_dump() for error in errors],
        },
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## BookStore API

A REST API for the book store catalog.

### Resources
- **Authors**: read with the Customer role, write with the Administrator role
- **Books**: open to every caller

### Authentication
Register at `/api/users/register`, log in at `/api/users/login`, then send
`Authorization: Bearer <accessToken>`.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last so it wraps everything else and runs before routing
    app.add_middleware(NormalizeApiPathMiddleware)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed or missing input is a 400, never FastAPI's 422."""
        errors = field_errors_from_pydantic(exc.errors())
        logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} field error(s)")
        return validation_response("Invalid request", errors)

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(
        request: Request,
        exc: ValidationFailed,
    ) -> JSONResponse:
        return validation_response(exc.detail, exc.errors)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Database errors that escaped a repository."""
        logger.error(f"Database error: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all: log everything, tell the client nothing."""
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_MESSAGE},
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------
    api_prefix = "/api"

    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)
    app.include_router(users_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health and Root
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    def health_check() -> dict:
        """Used by load balancers and container probes."""
        database_ok = ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "app": settings.app_name,
            "version": __version__,
            "database": database_ok,
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "default_limit": settings.rate_limit_default,
            },
        }

    @app.get("/", tags=["Root"], summary="API root")
    def root() -> dict:
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
